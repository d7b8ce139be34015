"""Tests for GraphBuilder accumulation and rendering."""

import pytest

from dotgen.core.identifiers import IdPolicy, InvalidIdentifierError
from dotgen.core.models import (
    DotOutput,
    Edge,
    EntityFactory,
    Id,
    NodeDefaults,
    RenderConfig,
    Subgraph,
    Vertex,
)
from dotgen.visualization.graph_builder import GraphBuilder


def numeric_vertex(index: int) -> Vertex:
    key = f"node_{index}"
    return Vertex(Id(key), label=key)


def nested_fixture() -> GraphBuilder:
    builder = GraphBuilder()
    builder.accept(numeric_vertex(0))
    builder.accept(
        Subgraph(
            "outer",
            label="Outer",
            color="gray",
            node_defaults=NodeDefaults(fontcolor="black"),
            entities=[numeric_vertex(1), Subgraph("inner", entities=[numeric_vertex(2)])],
        ),
    )
    builder.accept(Edge("node_0", "node_2", color="red"))
    return builder


def test_render_empty_graph():
    """Test a builder with no entities."""
    output = GraphBuilder().build(Id("g"))

    assert output == DotOutput("digraph g {\n  compound = true;\n}\n")


def test_render_single_vertex():
    """Test rendering one labelled vertex."""
    builder = GraphBuilder()
    builder.accept(numeric_vertex(0))
    output = builder.build(Id("test_graph"))

    assert output.text == (
        "digraph test_graph {\n"
        "  compound = true;\n"
        "\n"
        '  node_0[label="node_0", ];\n'
        "}\n"
    )


def test_render_single_edge():
    """Test an edge is emitted after both vertices in acceptance order."""
    builder = GraphBuilder()
    builder.accept(numeric_vertex(0))
    builder.accept(numeric_vertex(1))
    builder.accept(
        Edge(
            source=numeric_vertex(0).id,
            target=numeric_vertex(1).id,
            label="asdf",
        ),
    )
    output = builder.build(Id("test_graph"))

    assert output.text == (
        "digraph test_graph {\n"
        "  compound = true;\n"
        "\n"
        '  node_0[label="node_0", ];\n'
        "\n"
        '  node_1[label="node_1", ];\n'
        "\n"
        '  node_0 -> node_1[label="asdf", ];\n'
        "}\n"
    )


def test_build_is_deterministic():
    """Test identical entity trees render byte-identically."""
    assert nested_fixture().build("g") == nested_fixture().build("g")


def test_build_nested_fixture():
    """Test a mixed tree renders with indentation per level."""
    output = nested_fixture().build("g")

    assert output.text == "\n".join([
        "digraph g {",
        "  compound = true;",
        "",
        '  node_0[label="node_0", ];',
        "",
        "  subgraph outer {",
        '    label = "Outer";',
        "    cluster = true;",
        "    rank = same;",
        "",
        '    color = "gray";',
        '    node [fontcolor="black", ];',
        "",
        '    node_1[label="node_1", ];',
        "    subgraph inner {",
        "      cluster = true;",
        "      rank = same;",
        "",
        "",
        '      node_2[label="node_2", ];',
        "    }",
        "  }",
        "",
        '  node_0 -> node_2[color="red", ];',
        "}",
        "",
    ])


def test_build_accepts_string_name():
    """Test plain graph names use the configured policy."""
    builder = GraphBuilder(RenderConfig(id_policy=IdPolicy.PERMISSIVE))
    assert builder.build("my graph").text.startswith('digraph "my graph" {\n')


def test_build_uses_configured_graph_name():
    """Test the configured name is used when none is given."""
    assert GraphBuilder().build().text.startswith("digraph G {\n")
    assert GraphBuilder(RenderConfig(graph_name="deps")).build().text.startswith("digraph deps {")


def test_invalid_graph_name_fails_before_rendering():
    """Test a strict name violation aborts without consuming the builder."""
    builder = GraphBuilder()
    builder.accept(numeric_vertex(0))

    with pytest.raises(InvalidIdentifierError):
        builder.build("bad id!")

    assert len(builder) == 1
    assert "node_0" in builder.build("good").text


def test_builder_cannot_be_built_twice():
    """Test building consumes the builder."""
    builder = GraphBuilder()
    builder.accept(numeric_vertex(0))
    builder.build("g")

    with pytest.raises(RuntimeError, match="already been built"):
        builder.build("g")
    with pytest.raises(RuntimeError):
        builder.accept(numeric_vertex(1))


def test_accept_rejects_non_entities():
    """Test only vertices, edges and subgraphs are accepted."""
    builder = GraphBuilder()

    with pytest.raises(TypeError):
        builder.accept("node_0")


def test_accept_all_preserves_order():
    """Test bulk acceptance keeps iteration order."""
    builder = GraphBuilder()
    builder.accept_all(numeric_vertex(i) for i in range(3))

    assert [entity.id.value for entity in builder.entities] == ["node_0", "node_1", "node_2"]


def test_permissive_builder_quotes_factory_entities():
    """Test entities created for a permissive builder are quoted as needed."""
    config = RenderConfig(id_policy=IdPolicy.PERMISSIVE)
    factory = EntityFactory(config)
    builder = GraphBuilder(config)
    builder.accept(factory.vertex("my node"))
    builder.accept(factory.vertex("node-1"))

    assert builder.build("my graph").text == (
        'digraph "my graph" {\n'
        "  compound = true;\n"
        "\n"
        '  "my node";\n'
        "\n"
        '  "node-1";\n'
        "}\n"
    )


def test_builder_rejects_mismatched_id_policy():
    """Test a document never mixes strict and permissive identifiers."""
    builder = GraphBuilder(RenderConfig(id_policy=IdPolicy.PERMISSIVE))

    with pytest.raises(ValueError, match="strict policy"):
        builder.accept(Vertex("node-1"))
    with pytest.raises(ValueError):
        builder.accept(Subgraph(Id("grp", IdPolicy.PERMISSIVE), entities=[Edge("a", "b")]))

    assert len(builder) == 0
    with pytest.raises(ValueError):
        GraphBuilder().build(Id("g", IdPolicy.PERMISSIVE))


def test_accept_rejects_non_entity_children():
    """Test subgraph children are checked when the subgraph is accepted."""
    builder = GraphBuilder()

    with pytest.raises(TypeError):
        builder.accept(Subgraph("outer", entities=[Subgraph("inner", entities=["node_0"])]))
    assert len(builder) == 0


def test_build_checks_children_added_after_accept():
    """Test a bad child added later fails the build without consuming the builder."""
    subgraph = Subgraph("outer")
    builder = GraphBuilder()
    builder.accept(subgraph)
    subgraph.add("node_0")

    with pytest.raises(TypeError):
        builder.build("g")

    subgraph.entities.clear()
    assert "subgraph outer {" in builder.build("g").text
