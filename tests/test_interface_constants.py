from core.desktop.devtools.interface.constants import HELP, INDENT, LANG_PACK, SEPARATOR, TIMESTAMP_FORMAT


def test_constants_values_present():
    assert "Normal mode" in HELP
    assert "en" in LANG_PACK and "ru" in LANG_PACK
    assert TIMESTAMP_FORMAT == "%Y-%m-%d %H:%M %z"
    assert SEPARATOR == "<--->"
    assert INDENT == " " * 4


def test_every_error_key_is_translated():
    from core import errors

    for name in errors.__all__:
        cls = getattr(errors, name)
        key = getattr(cls, "key", None)
        if key is None:
            continue
        assert key in LANG_PACK["en"], name
