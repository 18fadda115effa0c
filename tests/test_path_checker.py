import pytest

from zerolaunch.path_checker import PathChecker, PatternError

DEFAULT_PATTERNS = ["*.url", "*.exe", "*.lnk"]
DEFAULT_EXCLUDED = ["帮助", "help", "uninstall", "卸载", "zerolaunch-rs"]


def default_checker():
    return PathChecker(DEFAULT_PATTERNS, "Wildcard", DEFAULT_EXCLUDED)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Foo.EXE", True),
        ("Browser.lnk", True),
        ("site.url", True),
        ("notes.txt", False),
        ("exe", False),
    ],
)
def test_default_wildcards(name, expected):
    assert default_checker().is_match(name) is expected


@pytest.mark.parametrize(
    "name", ["Uninstall Tool.exe", "Help.lnk", "ZeroLaunch-rs.exe", "软件卸载.lnk"]
)
def test_excluded_keywords_reject(name):
    assert default_checker().is_match(name) is False


def test_excluded_keys_are_lowercased():
    checker = PathChecker(["*.exe"], "Wildcard", ["SETUP"])
    assert checker.is_match("setup.exe") is False
    assert checker.is_match("app.exe") is True


def test_uppercase_wildcard_never_matches_lowercased_name():
    checker = PathChecker(["*.EXE"], "Wildcard", [])
    assert checker.is_match("x.exe") is False
    assert checker.is_match("X.EXE") is False


def test_question_mark_matches_one_character():
    checker = PathChecker(["a?.exe"], "Wildcard", [])
    assert checker.is_match("ab.exe") is True
    assert checker.is_match("abc.exe") is False


def test_brace_alternation():
    checker = PathChecker(["*.{exe,lnk}"], "Wildcard", [])
    assert checker.is_match("a.lnk") is True
    assert checker.is_match("a.exe") is True
    assert checker.is_match("a.url") is False


def test_character_class_and_negation():
    checker = PathChecker(["[!a]*.exe"], "Wildcard", [])
    assert checker.is_match("b.exe") is True
    assert checker.is_match("a.exe") is False
    ranged = PathChecker(["[a-c].exe"], "Wildcard", [])
    assert ranged.is_match("b.exe") is True
    assert ranged.is_match("d.exe") is False


def test_regex_matches_anywhere():
    checker = PathChecker([r"app\d+"], "Regex", [])
    assert checker.is_match("my APP12.exe") is True
    assert checker.is_match("app.exe") is False


def test_regex_anchored():
    checker = PathChecker([r"^app\d+\.exe$"], "Regex", [])
    assert checker.is_match("APP7.exe") is True
    assert checker.is_match("xapp7.exe") is False


def test_no_patterns_matches_nothing():
    checker = PathChecker([], "Regex", [])
    assert checker.is_match("anything.exe") is False


def test_unknown_pattern_type():
    with pytest.raises(PatternError):
        PathChecker(["*.exe"], "Glob", [])


def test_invalid_regex():
    with pytest.raises(PatternError):
        PathChecker(["("], "Regex", [])


@pytest.mark.parametrize("pattern", ["[abc", "*.{exe,lnk", "{a,{b,c}}"])
def test_invalid_wildcards(pattern):
    with pytest.raises(PatternError):
        PathChecker([pattern], "Wildcard", [])