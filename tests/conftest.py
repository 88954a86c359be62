"""Pytest configuration and shared CSV fixtures.

Each vector pairs raw CSV text with the rows it must parse to. Texts use
CRLF unless the vector is about other line endings.
"""

import pytest

PIRATE_FAMILY = (
    "\U0001f3f4\u200d\u2620\ufe0f"
    "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466"
)


def _crlf(*lines: str) -> str:
    return "".join(line + "\r\n" for line in lines)


CSV_VECTORS = {
    "simple": (
        _crlf(
            "column1,column2,column3",
            "abc,def,ghi",
            "123,456,789",
            "aaa,bbb,ccc",
        ),
        [
            ["column1", "column2", "column3"],
            ["abc", "def", "ghi"],
            ["123", "456", "789"],
            ["aaa", "bbb", "ccc"],
        ],
    ),
    "escaping": (
        _crlf(
            "name,value",
            "Three spaces,   ",
            'Three commas,",,,"',
            'Three newlines,"\r\n\r\n\r\n"',
            'Three unescaped double quotes,a"""',
            'Three escaped double quotes,""""""""',
            'Unescaped double quotes around delimiter 1 ",a',
            'Unescaped double quotes around delimiter 2 "",a',
            'Unescaped double quotes around delimiter 3 """,a',
            'Unescaped double quotes around delimiter 4, "',
            'Unescaped double quotes around delimiter 5, ""',
            'Unescaped double quotes around delimiter 6, """',
            "Spaces before and after a value,   abc   ",
            'Spaces before and after three unescaped double quotes,   """   ',
            'Spaces trailing escaped double quotes,"abc"   ',
            'Characters trailing escaped double quotes,"abc" def',
            'Unescaped double quotes trailing escaped double quotes,"abc" " def 123 """ 456',
            '"Unescaped ""double quotes"" trailing escaped double quotes","abc" """ def 123 """ 456',
            "Unicode test 1,你好",
            "Unicode test 2,\U0001f602\U0001f44c\U0001f44d",
            "Unicode test 3," + PIRATE_FAMILY,
            'Mixed,",\r\n"",\r\n"",\r\n"""',
        ),
        [
            ["name", "value"],
            ["Three spaces", "   "],
            ["Three commas", ",,,"],
            ["Three newlines", "\r\n\r\n\r\n"],
            ["Three unescaped double quotes", 'a"""'],
            ["Three escaped double quotes", '"""'],
            ['Unescaped double quotes around delimiter 1 "', "a"],
            ['Unescaped double quotes around delimiter 2 ""', "a"],
            ['Unescaped double quotes around delimiter 3 """', "a"],
            ["Unescaped double quotes around delimiter 4", ' "'],
            ["Unescaped double quotes around delimiter 5", ' ""'],
            ["Unescaped double quotes around delimiter 6", ' """'],
            ["Spaces before and after a value", "   abc   "],
            ["Spaces before and after three unescaped double quotes", '   """   '],
            ["Spaces trailing escaped double quotes", "abc   "],
            ["Characters trailing escaped double quotes", "abc def"],
            ["Unescaped double quotes trailing escaped double quotes", 'abc " def 123 """ 456'],
            ['Unescaped "double quotes" trailing escaped double quotes', 'abc """ def 123 """ 456'],
            ["Unicode test 1", "你好"],
            ["Unicode test 2", "\U0001f602\U0001f44c\U0001f44d"],
            ["Unicode test 3", PIRATE_FAMILY],
            ["Mixed", ',\r\n",\r\n",\r\n"'],
        ],
    ),
    "escaping_edges": (
        _crlf(
            '",,,",""""""""',
            '"""""""",",,,"',
            'a"b"",a"b""',
            '"a""b""""","a""b"""""',
        ),
        [
            [",,,", '"""'],
            ['"""', ",,,"],
            ['a"b""', 'a"b""'],
            ['a"b""', 'a"b""'],
        ],
    ),
    "sparse": (
        _crlf(
            "column1,column2,column3",
            "",
            ",",
            ",,",
            ",,,",
            ",,,,",
            "aaa,bbb,ccc",
            "111,222,333,444,555,666,777,888",
            ",hhh,iii",
            "ggg,,iii",
            "ggg,hhh,",
            ",hhh,",
            "ggg,,",
            ",,iii",
            ",,",
            ",,",
            ",,",
            "",
            "",
        ),
        [
            ["column1", "column2", "column3"],
            [""],
            ["", ""],
            ["", "", ""],
            ["", "", "", ""],
            ["", "", "", "", ""],
            ["aaa", "bbb", "ccc"],
            ["111", "222", "333", "444", "555", "666", "777", "888"],
            ["", "hhh", "iii"],
            ["ggg", "", "iii"],
            ["ggg", "hhh", ""],
            ["", "hhh", ""],
            ["ggg", "", ""],
            ["", "", "iii"],
            ["", "", ""],
            ["", "", ""],
            ["", "", ""],
            [""],
            [""],
        ],
    ),
    "lf_eol": (
        "column1,column2\na,b\nc,d\n1,2\n3,4\n",
        [
            ["column1", "column2"],
            ["a", "b"],
            ["c", "d"],
            ["1", "2"],
            ["3", "4"],
        ],
    ),
    "bom": (
        "\ufeff" + _crlf("column1,column2", "ab,cd", "12,34"),
        [
            ["column1", "column2"],
            ["ab", "cd"],
            ["12", "34"],
        ],
    ),
    "single_value": ("abc", [["abc"]]),
    "single_column": ("abc\r\ndef\r\nghi", [["abc"], ["def"], ["ghi"]]),
    "single_row": ("abc,def,ghi", [["abc", "def", "ghi"]]),
    "blank": ("", [[""]]),
}


@pytest.fixture(params=sorted(CSV_VECTORS))
def csv_vector(request):
    """(text, rows) for every known CSV vector."""
    return CSV_VECTORS[request.param]


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file under tmp_path without newline translation."""

    def _write(text, name="input.csv", encoding="utf-8"):
        path = tmp_path / name
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
        return path

    return _write
