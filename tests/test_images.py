import pytest

from slidedeck.images import ImageAttributeError, ImageAttributes, parse_image_attributes, parse_percent


@pytest.mark.parametrize(
    "text, expected",
    [
        ("image:width:50%", 50),
        ("image:w:50%", 50),
        ("", None),
        ("width", None),
    ],
)
def test_image_attributes(text, expected):
    assert parse_image_attributes(text, "image:").width == expected


@pytest.mark.parametrize("text, expected", [("width:50%", 50), ("", None)])
def test_image_attributes_empty_prefix(text, expected):
    assert parse_image_attributes(text, "").width == expected


def test_attribute_not_at_start_is_ignored():
    assert parse_image_attributes("x image:width:50%", "image:") == ImageAttributes()


def test_leading_space_after_comma_is_ignored():
    attributes = parse_image_attributes("image:w:20%, image:w:70%", "image:")
    assert attributes.width == 20


def test_last_attribute_wins():
    assert parse_image_attributes("image:w:20%,image:w:70%", "image:").width == 70


def test_unknown_attribute():
    with pytest.raises(ImageAttributeError, match="unknown attribute: 'height'"):
        parse_image_attributes("image:height:5%", "image:")


def test_missing_attribute_value():
    with pytest.raises(ImageAttributeError, match="no attribute given"):
        parse_image_attributes("image:width", "image:")


def test_empty_prefix_bare_word_is_error():
    with pytest.raises(ImageAttributeError):
        parse_image_attributes("width", "")


def test_invalid_width():
    with pytest.raises(ImageAttributeError, match="invalid width"):
        parse_image_attributes("image:width:abc", "image:")


def test_parse_percent():
    assert parse_percent("75%") == 75


@pytest.mark.parametrize("text", ["75", "-5%", "101%", "%"])
def test_parse_percent_rejects(text):
    with pytest.raises(ImageAttributeError):
        parse_percent(text)


def test_width_ratio():
    assert parse_image_attributes("image:w:50%").width_ratio == 0.5
    assert ImageAttributes().width_ratio is None