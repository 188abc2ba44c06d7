import pytest

from rotate.types import BaseType, base_type_name


@pytest.mark.parametrize(
    "base_type, expected",
    [
        (BaseType.VOID, "VOID"),
        (BaseType.UINT, "uint"),
        (BaseType.TBD, "TBD"),
        (BaseType.INVALID, "INVALID"),
        (BaseType.ARRAY, "ARRAY"),
    ],
)
def test_base_type_names(base_type, expected):
    assert base_type_name(base_type) == expected


def test_names_are_unique():
    names = [base_type_name(t) for t in BaseType]
    assert len(set(names)) == len(names)


def test_names_match_members_except_uint():
    for base_type in BaseType:
        if base_type is BaseType.UINT:
            assert base_type_name(base_type) == base_type.name.lower()
        else:
            assert base_type_name(base_type) == base_type.name


def test_invalid_is_first_member():
    assert base_type_name(list(BaseType)[0]) == "INVALID"


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        base_type_name("INT")