import pytest

from component_render.errors import TranslationNotFoundError
from component_render.utils import i18n
from component_render.utils.locales import freeze, load_locales

LOCALE = freeze({
    "test1": "foo",
    "test2": "baz",
    "fields": {"name": {"label": "Full name"}},
    "count": 3,
})


def _strict():
    return i18n.make_resolver(LOCALE)


def _realistic():
    return i18n.make_resolver(LOCALE, realistic=True)


def test_make_resolver_picks_policy():
    assert isinstance(_strict(), i18n.StrictResolver)
    assert isinstance(_realistic(), i18n.RealisticResolver)


def test_strict_shows_key_unless_translating():
    r = _strict()
    assert r.resolve("test2") == "[test2]"
    assert r.resolve("test2", translate=True) == "baz"


def test_strict_uses_only_first_key():
    r = _strict()
    assert r.resolve(["test2", "test1"], translate=True) == "baz"
    assert r.resolve(["test2", "test1"]) == "[test2]"
    with pytest.raises(TranslationNotFoundError):
        r.resolve(["missing", "test1"], translate=True)


def test_strict_missing_key_raises():
    with pytest.raises(TranslationNotFoundError) as exc:
        _strict().resolve("test3")
    assert exc.value.key == "test3"
    assert str(exc.value) == "Translation not found for test3"


def test_strict_ignore_suppresses_missing():
    r = _strict()
    assert r.resolve("test3", ignore=["test3"]) == "[test3]"
    assert r.resolve("test3", ignore=True) == "[test3]"
    assert r.resolve("test3", ignore=True, translate=True) is None
    with pytest.raises(TranslationNotFoundError):
        r.resolve("test3", ignore=["other"])


def test_strict_self_false_and_default():
    r = _strict()
    assert r.resolve("test3", {"self": False}, translate=True) is None
    assert r.resolve("test3", {"optional": True}) == "[test3]"
    assert r.resolve("test3", {"default": "fallback"}, translate=True) == "fallback"
    assert r.resolve("test3", {"default": "fallback"}) == "[test3]"


def test_strict_coerces_non_string_values():
    r = _strict()
    assert r.resolve("count", translate=True) == "3"
    assert r.resolve("fields.name.label", translate=True) == "Full name"


def test_strict_without_locale_shows_key():
    r = i18n.make_resolver(None)
    assert r.resolve("anything", translate=True) == "[anything]"
    assert r.resolve(["first", "second"]) == "[first]"


def test_realistic_first_found_key_wins():
    r = _realistic()
    assert r.resolve(["test3", "test2", "test1"]) == "baz"
    assert r.resolve("test1") == "foo"


def test_realistic_fallbacks():
    r = _realistic()
    assert r.resolve(["test3"], {"default": "a default"}) == "a default"
    assert r.resolve(["test3", "test4"]) == "test3"
    assert not r.resolve(["test3"], {"self": False})


def test_realistic_never_raises():
    r = _realistic()
    assert r.resolve("test3", ignore=None) == "test3"
    assert r.resolve([]) is None
    assert r.resolve([], {"default": "d"}) == "d"


def test_realistic_returns_values_as_is():
    r = _realistic()
    assert r.resolve("count") == 3
    assert r.resolve("fields.name") == {"label": "Full name"}


def test_realistic_without_locale_is_none():
    assert i18n.make_resolver(None, realistic=True).resolve(["test1"], {"default": "d"}) is None


def test_is_ignored():
    assert i18n.is_ignored("a", True)
    assert i18n.is_ignored("a", ["a", "b"])
    assert i18n.is_ignored("a", "a")
    assert not i18n.is_ignored("a", None)
    assert not i18n.is_ignored("a", ["b"])
    assert not i18n.is_ignored("a", False)


def _null_leaf_locale(tmp_path):
    p = tmp_path / "en.yml"
    p.write_text("label:\nother: x\n", encoding="utf-8")
    return load_locales([p])


def test_strict_null_leaf_is_missing(tmp_path):
    r = i18n.make_resolver(_null_leaf_locale(tmp_path))
    assert r.resolve("label", {"default": "fallback"}, translate=True) == "fallback"
    with pytest.raises(TranslationNotFoundError):
        r.resolve("label", translate=True)


def test_realistic_null_leaf_moves_to_next_candidate(tmp_path):
    r = i18n.make_resolver(_null_leaf_locale(tmp_path), realistic=True)
    assert r.resolve(["label", "other"]) == "x"
    assert r.resolve("label", {"default": "d"}) == "d"
