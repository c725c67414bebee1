from metatable.services.nodes import Mapping, Scalar, Sequence, to_plain
from metatable.services.parser import parse_front_matter


def test_mapping_keeps_order():
    tree = parse_front_matter("b: 1\na: two\nc: true")
    assert [k.value for k in tree.keys()] == ["b", "a", "c"]
    assert tree.values() == [Scalar(1), Scalar("two"), Scalar(True)]


def test_duplicate_keys_are_kept():
    tree = parse_front_matter("tag: a\ntag: b")
    assert tree.pairs == ((Scalar("tag"), Scalar("a")), (Scalar("tag"), Scalar("b")))


def test_nested_mapping_and_sequence():
    tree = parse_front_matter("meta:\n  a: 1\n  b: 2\ntags: [x, y]")
    meta, tags = tree.values()
    assert isinstance(meta, Mapping)
    assert meta.pairs == ((Scalar("a"), Scalar(1)), (Scalar("b"), Scalar(2)))
    assert tags == Sequence((Scalar("x"), Scalar("y")))


def test_mapping_as_key():
    tree = parse_front_matter("? {a: 1}\n: v")
    key, value = tree.pairs[0]
    assert key == Mapping(((Scalar("a"), Scalar(1)),))
    assert value == Scalar("v")


def test_anchors_and_merge_keys():
    tree = parse_front_matter("base: &b {x: 1}\nalias: *b\nchild:\n  <<: *b\n  y: 2")
    base, alias, child = tree.values()
    assert alias == base
    assert child.pairs == ((Scalar("x"), Scalar(1)), (Scalar("y"), Scalar(2)))


def test_empty_header_is_empty_mapping():
    assert parse_front_matter("") == Mapping()
    assert parse_front_matter("# solo comentario") == Mapping()


def test_bare_scalar_is_not_metadata():
    assert parse_front_matter("draft") is None
    assert parse_front_matter("Just some prose after a rule.") is None
    assert parse_front_matter("42") is None


def test_sequence_of_pairs_becomes_mapping():
    tree = parse_front_matter("- a: 1\n- b: 2\n- a: 3")
    assert [(k.value, v.value) for k, v in tree] == [("a", 1), ("b", 2), ("a", 3)]


def test_unparseable_returns_none():
    assert parse_front_matter("a: [1") is None
    assert parse_front_matter("- 1\n- 2") is None
    assert parse_front_matter("- {a: 1, b: 2}") is None


def test_to_plain():
    tree = parse_front_matter("name: x\ntags: [a, b]\nmeta: {n: 1}")
    assert to_plain(tree) == {"name": "x", "tags": ["a", "b"], "meta": {"n": 1}}
    dup = parse_front_matter("k: 1\nk: 2")
    assert to_plain(dup) == [["k", 1], ["k", 2]]


def test_omap_and_pairs_tags_build_mappings():
    tree = parse_front_matter("order: !!omap [b: 1, a: 2]\nlog: !!pairs [x: 1, x: 2]")
    order, log = tree.values()
    assert order == Mapping(((Scalar("b"), Scalar(1)), (Scalar("a"), Scalar(2))))
    assert log == Mapping(((Scalar("x"), Scalar(1)), (Scalar("x"), Scalar(2))))


def test_omap_at_root():
    tree = parse_front_matter("!!omap\n- b: 1\n- a: 2")
    assert [k.value for k in tree.keys()] == ["b", "a"]


def test_set_tag_builds_sequence():
    tree = parse_front_matter("langs: !!set {go: null, python: null}")
    assert tree.values() == [Sequence((Scalar("go"), Scalar("python")))]


def test_malformed_omap_is_a_parse_failure():
    assert parse_front_matter("x: !!omap [{a: 1, b: 2}]") is None


def test_to_plain_binary_and_dates():
    tree = parse_front_matter("k: !!binary /w==\nday: 2024-05-01")
    assert to_plain(tree) == {"k": "/w==", "day": "2024-05-01"}
