"""Tests for the directory aggregation workflow."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from catalog_props.core.config import Settings
from catalog_props.core.exceptions import (
    DocumentParseError,
    FileAccessError,
    MissingFieldError,
    UnknownElementTypeError,
)
from catalog_props.core.logging import configure_logging
from catalog_props.workflow.aggregator import (
    aggregate_items,
    load_document,
    run_aggregation,
    serialize_aggregate,
)


def _text(value: str) -> dict[str, str]:
    return {"type": "text", "text": value}


def _write_item(path: Path, name: str, *elements: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "id": path.stem,
        "name": _text(name),
        "infoBlocks": [{"type": "list", "elements": list(elements)}],
    }
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_single_document_round_trip(tmp_path: Path) -> None:
    _write_item(
        tmp_path / "weapon" / "ak.json",
        "АК-74",
        {"type": "key-value", "key": _text("Цвет"), "value": _text("Красный")},
    )

    output = serialize_aggregate(aggregate_items(tmp_path))

    assert output == '{"АК-74": {"Цвет": "Красный"}}'


def test_aggregate_collects_every_item(tmp_path: Path) -> None:
    _write_item(tmp_path / "armor" / "b.json", "Шлем", {"type": "numeric", "name": _text("Вес"), "value": 3})
    _write_item(tmp_path / "weapon" / "a.json", "АК-74", {"type": "item", "name": _text("Патрон 5.45")})

    aggregate = aggregate_items(tmp_path)

    assert list(aggregate) == ["АК-74", "Шлем"]
    assert aggregate["Шлем"] == {"Вес": "3"}
    assert aggregate["АК-74"] == {"Подходит для": "Патрон 5.45"}


def test_duplicate_item_name_keeps_last_file(tmp_path: Path) -> None:
    _write_item(tmp_path / "x" / "b.json", "Шлем", {"type": "numeric", "name": _text("Вес"), "value": 2})
    _write_item(tmp_path / "y" / "a.json", "Шлем", {"type": "numeric", "name": _text("Вес"), "value": 1})

    aggregate = aggregate_items(tmp_path)

    assert aggregate == {"Шлем": {"Вес": "2"}}


def test_duplicate_item_name_logs_warning(tmp_path: Path) -> None:
    _write_item(tmp_path / "a.json", "Шлем", {"type": "numeric", "name": _text("Вес"), "value": 1})
    later = _write_item(tmp_path / "b.json", "Шлем", {"type": "numeric", "name": _text("Вес"), "value": 2})
    configure_logging("DEBUG", settings=Settings())

    with capture_logs() as logs:
        aggregate_items(tmp_path)

    warnings = [entry for entry in logs if entry["event"] == "aggregate.duplicate_item"]
    assert len(warnings) == 1
    assert warnings[0]["log_level"] == "warning"
    assert warnings[0]["item"] == "Шлем"
    assert warnings[0]["file"] == str(later)


def test_decimal_values_keep_source_digits(tmp_path: Path) -> None:
    path = tmp_path / "scope.json"
    path.write_text(
        '{"name": {"type": "text", "text": "Прицел"}, "infoBlocks": [{"elements": ['
        '{"type": "numeric", "name": {"type": "text", "text": "Вес"}, "value": 2.50},'
        '{"type": "range", "name": {"type": "text", "text": "Зум"}, "min": 1e2, "max": 4.0}'
        ']}]}',
        encoding="utf-8",
    )

    aggregate = aggregate_items(tmp_path)

    assert aggregate == {"Прицел": {"Вес": "2.50", "Зум": "1E+2 to 4.0"}}


def test_run_aggregation_keeps_stdout_for_output(tmp_path: Path, capsys) -> None:
    _write_item(tmp_path / "a.json", "Шлем", {"type": "text", "text": _text("Не тонет")})

    output = run_aggregation(Settings(root_dir=tmp_path))

    assert json.loads(output) == {"Шлем": {"Свойство": "Не тонет"}}
    assert capsys.readouterr().out == ""


def test_missing_root_produces_empty_aggregate(tmp_path: Path) -> None:
    assert aggregate_items(tmp_path / "missing") == {}


def test_unknown_element_type_aborts_run(tmp_path: Path) -> None:
    _write_item(tmp_path / "a.json", "Шлем", {"type": "text", "text": _text("ok")})
    broken = _write_item(tmp_path / "b.json", "Куртка", {"type": "unknown"})

    with pytest.raises(UnknownElementTypeError) as excinfo:
        aggregate_items(tmp_path)

    assert f"while processing {broken}" in excinfo.value.__notes__


def test_missing_field_aborts_run(tmp_path: Path) -> None:
    _write_item(tmp_path / "a.json", "Шлем", {"type": "range", "name": _text("Урон"), "min": 1})

    with pytest.raises(MissingFieldError):
        aggregate_items(tmp_path)


def test_invalid_json_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DocumentParseError) as excinfo:
        load_document(path)
    assert excinfo.value.path == path


def test_non_object_document_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(DocumentParseError):
        load_document(path)


def test_undecodable_file_raises_access_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(FileAccessError) as excinfo:
        aggregate_items(tmp_path)
    assert excinfo.value.path == path


def test_run_aggregation_writes_output_file(tmp_path: Path) -> None:
    root = tmp_path / "items"
    _write_item(root / "a.json", "Шлем", {"type": "text", "text": _text("Не тонет")})
    output_path = tmp_path / "out" / "items.json"
    settings = Settings(root_dir=root, output_path=output_path, output_indent=2)

    output = run_aggregation(settings)

    assert json.loads(output) == {"Шлем": {"Свойство": "Не тонет"}}
    assert output_path.read_text(encoding="utf-8") == f"{output}\n"
    assert "\n  " in output
