from jardin.help_index import HelpNode, build_tree, extract_anchors


def test_extract_anchors_reads_quoted_names():
    html = '<p><a name="intro"></a>Intro</p>;<p><a name="intro/start"></a>Start</p>'
    assert extract_anchors(html) == ["intro", "intro/start"]


def test_extract_anchors_keeps_first_per_chunk():
    html = '<a name="a"></a><a name="b"></a>'
    assert extract_anchors(html) == ["a"]


def test_extract_anchors_without_closing_bracket_takes_rest():
    assert extract_anchors('<a name="abc') == ["abc"]


def test_extract_anchors_ignores_text_without_anchors():
    assert extract_anchors("<p>style: x; color: red;</p>") == []


def test_build_tree_groups_sections_under_entries():
    anchors = ["Intro", "Intro/Start", "Intro/Menus", "Plan", "Plan/Outils"]
    tree = build_tree(anchors)
    assert [node.text for node in tree] == ["Intro", "Plan"]
    assert [child.text for child in tree[0].children] == ["Start", "Menus"]
    assert [child.anchor for child in tree[0].children] == ["Intro/Start", "Intro/Menus"]
    assert [child.text for child in tree[1].children] == ["Outils"]


def test_build_tree_target_links_to_anchor():
    tree = build_tree(["Intro", "Intro/Start"])
    assert tree[0].target == "#Intro"
    assert tree[0].children[0].target == "#Intro/Start"


def test_build_tree_drops_duplicate_entries_case_insensitively():
    tree = build_tree(["Plan", "plan", "plan/x"])
    assert tree == [HelpNode("Plan", "Plan")]


def test_build_tree_ignores_sections_before_any_entry():
    tree = build_tree(["a/b", "c"])
    assert tree == [HelpNode("c", "c")]


def test_build_tree_empty():
    assert build_tree([]) == []


def test_extract_then_build():
    html = (
        '<a name="Jardin"></a>;<a name="Jardin/Parcelles"></a>;'
        '<a name="Cultures"></a>'
    )
    tree = build_tree(extract_anchors(html))
    assert [node.anchor for node in tree] == ["Jardin", "Cultures"]
    assert tree[0].children == [HelpNode("Parcelles", "Jardin/Parcelles")]
    assert tree[1].children == []