from repofetch.info_field import InfoField, InfoType


class _Field(InfoField):
    TYPE = InfoType.PROJECT

    def __init__(self, text):
        self.text = text

    def value(self):
        return self.text

    def title(self):
        return "title"


def test_info_field_get():
    assert InfoField.get(_Field("test"), []) == "test"


def test_info_field_get_none_when_type_disabled():
    assert InfoField.get(_Field("test"), [InfoType("project")]) is None


def test_info_field_get_none_when_value_is_empty():
    assert InfoField.get(_Field(""), []) is None


def test_info_field_get_other_type_disabled():
    disabled = [InfoType("repo"), InfoType("size")]
    assert InfoField.get(_Field("test"), disabled) == "test"


def test_info_type_cli_names():
    assert InfoType("last-change") is InfoType.LAST_CHANGE
    assert InfoType("lines-of-code") is InfoType.LINES_OF_CODE
    assert len(list(InfoType)) == 16