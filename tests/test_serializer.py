import yaml

from models import AuthorRecord
from serializer import record_to_dict, serialize_record


def _record() -> AuthorRecord:
    return AuthorRecord(
        name="Jane Doe",
        total=120,
        h_index=8,
        i10_index=5,
        yearly_citations={2021: 40, 2020: 30},
    )


def test_serialize_record_layout() -> None:
    assert serialize_record(_record()) == (
        "name: Jane Doe\n"
        "total: 120\n"
        "h_index: 8\n"
        "i10_index: 5\n"
        "years:\n"
        "  2020: 30\n"
        "  2021: 40\n"
    )


def test_serialize_record_is_deterministic_across_instances() -> None:
    assert serialize_record(_record()) == serialize_record(_record())


def test_serialize_record_empty_histogram() -> None:
    text = serialize_record(AuthorRecord("A", 0, 0, 0, {}))
    assert text.endswith("years: {}\n")


def test_serialize_record_keeps_unicode_name() -> None:
    text = serialize_record(AuthorRecord("Zoë Müller", 1, 1, 0, {}))
    assert "name: Zoë Müller\n" in text


def test_record_to_dict_key_order_and_year_keys() -> None:
    data = record_to_dict(_record())
    assert list(data) == ["name", "total", "h_index", "i10_index", "years"]
    assert yaml.safe_load(serialize_record(_record()))["years"] == {2020: 30, 2021: 40}
