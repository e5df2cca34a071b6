import pytest

from fcmp.config import OUTPUT_FORMATS, config, valid_encoding


@pytest.mark.parametrize("encoding", ["utf-8", "UTF8", "latin-1", "cp1252"])
def test_valid_encoding(encoding: str) -> None:
    assert valid_encoding(encoding)


@pytest.mark.parametrize("encoding", ["klingon", "", "utf-9"])
def test_invalid_encoding(encoding: str) -> None:
    assert not valid_encoding(encoding)


def test_defaults() -> None:
    assert config.ignore_case is False
    assert config.output_format in OUTPUT_FORMATS
    assert config.separator_width >= 1
    assert len(config.separator_char) == 1
    assert valid_encoding(config.encoding)
