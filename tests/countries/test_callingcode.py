"""Tests for calling codes and their derivation source.

Run with: pytest tests/countries/test_callingcode.py -v
"""

import json
import operator

import pytest

from phonecountry.countries.callingcode import Code, Source, as_source


class TestSource:
    """Test the derivation source enumeration"""

    def test_four_members(self):
        """Source is closed with four members"""
        assert list(Source) == [Source.PLUS, Source.IDD, Source.NUMBER, Source.DEFAULT]

    def test_default(self):
        """Default source is 'inferred from the caller-supplied default region'"""
        assert Source.default() is Source.DEFAULT

    def test_interchange_names(self):
        """Sources serialize under fixed lower-case names"""
        assert Source.PLUS.to_name() == "plus"
        assert Source.IDD.to_name() == "idd"
        assert Source.NUMBER.to_name() == "number"
        assert Source.DEFAULT.to_name() == "default"

    def test_from_name(self):
        """Names parse back to their members"""
        for source in Source:
            assert Source.from_name(source.to_name()) is source

    @pytest.mark.parametrize("name", ["PLUS", "Plus", "", "intl", None])
    def test_from_name_unknown(self, name):
        """Unknown names raise ValueError"""
        with pytest.raises(ValueError):
            Source.from_name(name)

    def test_as_source(self):
        """as_source accepts members and names"""
        assert as_source(Source.IDD) is Source.IDD
        assert as_source("idd") is Source.IDD


class TestCode:
    """Test the calling code value object"""

    def test_accessors(self):
        """value and source read back what was stored"""
        code = Code(33, Source.PLUS)
        assert code.value == 33
        assert code.source is Source.PLUS

    def test_default_source(self):
        """Code without a source carries Source.DEFAULT"""
        assert Code(33).source is Source.DEFAULT

    def test_source_distinguishes_codes(self):
        """Same value, different source: unequal and hashed apart"""
        plus = Code(33, Source.PLUS)
        default = Code(33, Source.DEFAULT)
        assert plus != default
        assert hash(plus) != hash(default)
        assert len({plus, default}) == 2

    def test_equal_codes(self):
        """Same value and source: equal with equal hashes"""
        a = Code(44, Source.IDD)
        b = Code(44, Source.IDD)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_values(self):
        """Same source, different value: unequal"""
        assert Code(33, Source.NUMBER) != Code(34, Source.NUMBER)

    def test_narrowing(self):
        """int() yields the stored value regardless of source"""
        assert int(Code(33, Source.IDD)) == 33
        for source in Source:
            assert int(Code(1, source)) == 1
            assert operator.index(Code(1, source)) == 1

    def test_immutable(self):
        """Fields cannot be reassigned"""
        code = Code(33, Source.PLUS)
        with pytest.raises(AttributeError):
            code.value = 34
        with pytest.raises(AttributeError):
            code.source = Source.IDD

    def test_no_assignment_validation(self):
        """Unassigned but representable values are carried as-is"""
        assert Code(0).value == 0
        assert Code(999).value == 999
        assert Code(0xFFFF).value == 0xFFFF

    @pytest.mark.parametrize("value", [-1, 0x10000])
    def test_out_of_range(self, value):
        """Values outside the unsigned 16-bit range are rejected"""
        with pytest.raises(ValueError):
            Code(value)

    @pytest.mark.parametrize("value", ["33", 33.0, True, None])
    def test_non_int_value(self, value):
        """Non-int values are rejected"""
        with pytest.raises(TypeError):
            Code(value)

    def test_source_must_be_member(self):
        """Source names are not accepted by the constructor"""
        with pytest.raises(TypeError):
            Code(33, "plus")


class TestCodeInterchange:
    """Test dict/JSON interchange form"""

    def test_to_dict(self):
        """to_dict uses the interchange source name"""
        assert Code(33, Source.PLUS).to_dict() == {"value": 33, "source": "plus"}
        assert Code(1).to_dict() == {"value": 1, "source": "default"}

    def test_json_round_trip(self):
        """Codes survive a JSON round trip"""
        code = Code(7, Source.NUMBER)
        assert Code.from_dict(json.loads(json.dumps(code.to_dict()))) == code

    def test_from_dict_missing_source(self):
        """Missing source means Source.DEFAULT"""
        assert Code.from_dict({"value": 81}) == Code(81, Source.DEFAULT)

    def test_from_dict_bad_source(self):
        """Unknown source name raises ValueError"""
        with pytest.raises(ValueError):
            Code.from_dict({"value": 81, "source": "fax"})
