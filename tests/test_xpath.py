from browser_session.selectors.xpath import prepend, split_union, xpath_literal


def test_literal_plain_and_single_quotes() -> None:
    assert xpath_literal("Email") == "'Email'"
    assert xpath_literal("it's") == '"it\'s"'


def test_literal_both_quote_kinds_uses_concat() -> None:
    assert xpath_literal('say "it\'s"') == "concat('say \"it', \"'\", 's\"')"


def test_split_union_ignores_pipes_in_predicates_and_strings() -> None:
    xp = ".//a[@title = 'a|b'] | .//b[(@x | @y)] | //c"
    assert split_union(xp) == [".//a[@title = 'a|b']", ".//b[(@x | @y)]", "//c"]


def test_prepend_scopes_each_branch() -> None:
    assert prepend(".//a | .//b", "/html/body") == "/html/body//a | /html/body//b"


def test_prepend_axis_and_absolute_forms() -> None:
    prefix = "/html/body/div[2]"
    assert prepend("descendant-or-self::h3", prefix) == "/html/body/div[2]/descendant-or-self::h3"
    assert prepend("//a", prefix) == "/html/body/div[2]//a"
    assert prepend(".", prefix) == prefix
    assert prepend("(.//a)[1]", prefix) == "(/html/body/div[2]//a)[1]"
