"""Graph rendering using Graphviz."""

import logging
import os
import shutil
import sys
from contextlib import contextmanager, nullcontext
from pathlib import Path

import graphviz

from ..core.models import OutputFormat

logger = logging.getLogger(__name__)


@contextmanager
def suppress_stderr():
    """Context manager to temporarily suppress stderr output."""
    with open(os.devnull, 'w') as devnull:
        old_stderr = sys.stderr
        sys.stderr = devnull
        try:
            yield
        finally:
            sys.stderr = old_stderr


class GraphRenderer:
    """Writes DOT documents to disk, optionally laid out by Graphviz."""

    def __init__(self, verbose: bool = False):
        """Initialize renderer.

        Args:
            verbose: Whether to show Graphviz warnings on stderr.
        """
        self.verbose = verbose

    def check_graphviz_installation(self) -> None:
        """Check if Graphviz is installed and accessible."""
        if not shutil.which('dot'):
            raise RuntimeError(
                "Graphviz 'dot' executable not found. Please install Graphviz:\n"
                "  Ubuntu/Debian: sudo apt-get install graphviz\n"
                "  macOS: brew install graphviz\n"
                "  Windows: Download from https://graphviz.org/download/"
            )

        logger.info("Graphviz installation verified")

    def render(
        self,
        dot_content: str,
        output_file: str,
        output_format: OutputFormat,
        engine: str = 'dot'
    ) -> Path:
        """Render DOT content to the specified format.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.
            output_format: DOT (source only), SVG or PNG.
            engine: Graphviz engine to use (dot, neato, fdp, sfdp, circo, twopi).

        Returns:
            Path to the generated file.
        """
        if output_format == OutputFormat.DOT:
            return self.save_dot_file(dot_content, output_file)

        logger.info(f"Rendering graph to {output_format.value} format")
        output_path = Path(output_file)
        output_path.write_bytes(self.render_to_bytes(dot_content, output_format, engine))

        logger.info(f"Graph rendered successfully to: {output_path}")
        return output_path

    def render_to_bytes(
        self,
        dot_content: str,
        output_format: OutputFormat,
        engine: str = 'dot'
    ) -> bytes:
        """Render DOT content to bytes for in-memory usage.

        Args:
            dot_content: DOT language content.
            output_format: Output format. DOT returns the source unchanged.
            engine: Graphviz engine to use.

        Returns:
            Rendered graph as bytes.
        """
        if output_format == OutputFormat.DOT:
            return dot_content.encode('utf-8')

        try:
            graph = graphviz.Source(dot_content, engine=engine)

            context_manager = suppress_stderr() if not self.verbose else nullcontext()

            with context_manager:
                return graph.pipe(format=output_format.value)

        except graphviz.ExecutableNotFound as e:
            raise RuntimeError(f"Graphviz executable not found: {e}") from e
        except Exception as e:
            raise RuntimeError(f"Failed to render graph: {e}") from e

    def get_available_engines(self) -> list[str]:
        """Get list of available Graphviz layout engines."""
        common_engines = ['dot', 'neato', 'fdp', 'sfdp', 'circo', 'twopi']
        return [engine for engine in common_engines if shutil.which(engine)]

    def save_dot_file(self, dot_content: str, output_file: str) -> Path:
        """Save DOT content to a .dot file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path; the suffix is forced to ``.dot``.

        Returns:
            Path to the saved DOT file.
        """
        dot_path = Path(output_file)

        if dot_path.suffix.lower() != '.dot':
            dot_path = dot_path.with_suffix('.dot')

        dot_path.write_text(dot_content, encoding='utf-8')
        logger.info(f"DOT file saved to: {dot_path}")

        return dot_path
