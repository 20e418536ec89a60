from codedrills.maps import Graph, ListCounter, equal, key_of


def test_equal_same_contents():
    assert equal({"alice": 26, "bob": 31}, {"bob": 31, "alice": 26}) is True


def test_equal_differs_after_edits():
    ages1 = {"alice": 26, "bob": 31}
    ages2 = {"alice": 26, "bob": 31}
    del ages1["alice"]
    ages1["charlie"] = ages1.get("charlie", 0) + 1
    assert equal(ages1, ages2) is False


def test_equal_distinguishes_missing_from_zero():
    assert equal({"a": 0}, {"b": 0}) is False
    assert equal({"a": 0}, {"a": 0}) is True


def test_equal_different_sizes():
    assert equal({"a": 1}, {"a": 1, "b": 2}) is False
    assert equal({}, {}) is True


def test_key_of_quotes_each_element():
    assert key_of(["a", "b", "c"]) == '["a" "b" "c"]'


def test_key_of_keeps_element_boundaries():
    assert key_of(["a b"]) != key_of(["a", "b"])
    assert key_of(['a"']) != key_of(["a", ""])
    assert key_of(["x"]) == key_of(["x"])


def test_list_counter_counts_additions():
    counter = ListCounter()
    counter.add(["a", "b", "c"])
    assert counter.count(["a", "b", "c"]) == 1
    counter.add(("a", "b", "c"))
    assert counter.count(["a", "b", "c"]) == 2
    assert counter.count(["a", "b"]) == 0


def test_graph_edges():
    graph = Graph()
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("C", "D")
    assert graph.has_edge("B", "C") is False
    assert graph.has_edge("A", "C") is True
    assert graph.has_edge("C", "D") is True
    assert graph.has_edge("D", "C") is False


def test_graph_lookup_does_not_create_vertices():
    graph = Graph()
    assert graph.has_edge("X", "Y") is False
    assert "X" not in graph.edges