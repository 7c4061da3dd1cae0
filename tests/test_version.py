from mipconv.version import mipconv_version


def test_version_string():
    assert mipconv_version() == "mipconv 2.6.0"


def test_version_names_program():
    name, number = mipconv_version().split()
    assert name == "mipconv"
    assert all(part.isdigit() for part in number.split("."))