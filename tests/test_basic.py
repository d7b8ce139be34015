"""Basic smoke tests for python-dotgen package."""

from dotgen import (
    GraphBuilder,
    IdPolicy,
    InvalidIdentifierError,
    OutputFormat,
    RenderConfig,
)


def test_package_version():
    """Test that package version can be imported."""
    from dotgen import __version__

    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_cli_import():
    """Test that CLI module can be imported."""
    from dotgen import cli

    assert cli is not None


def test_visualization_exports():
    """Test the visualization package exports its classes."""
    from dotgen.visualization import DOTGenerator, GraphRenderer, NetworkXGraphable

    assert DOTGenerator is not None
    assert GraphRenderer is not None
    assert NetworkXGraphable is not None


def test_graph_builder_creation():
    """Test GraphBuilder creation with configuration."""
    config = RenderConfig(id_policy=IdPolicy.PERMISSIVE, graph_name="g")
    builder = GraphBuilder(config)

    assert builder.config == config
    assert len(builder) == 0


def test_enums_values():
    """Test that enums have expected values."""
    assert IdPolicy.STRICT.value == "strict"
    assert IdPolicy.PERMISSIVE.value == "permissive"

    assert OutputFormat.DOT.value == "dot"
    assert OutputFormat.SVG.value == "svg"
    assert OutputFormat.PNG.value == "png"


def test_invalid_identifier_is_value_error():
    """Test the identifier error can be caught as ValueError."""
    assert issubclass(InvalidIdentifierError, ValueError)
