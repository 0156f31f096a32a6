"""Human-readable, optionally colored rendering of analysis results."""

from __future__ import annotations

from collections.abc import Sequence

from colorama import Fore, Style

from .models import AnalyzeResult, DependencyChainNode, chain_leaves

_DEPENDENCY_GROUPS = (
    ("normal", "Dependencies:", Fore.CYAN),
    ("peer", "Peer dependencies:", Fore.YELLOW),
    ("optional", "Optional dependencies:", Fore.BLUE),
)

_DEPENDENT_STYLES = {
    "normal": (Fore.LIGHTBLACK_EX, ""),
    "peer": (Fore.YELLOW, " (peer)"),
    "optional": (Fore.BLUE, " (optional)"),
}


def _label(name: str, version: str | None) -> str:
    return f"{name}@{version}" if version else name


class OutputFormatter:
    """Render analysis results as terminal text."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def _paint(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def format(self, package_name: str, result: AnalyzeResult) -> str:
        output: list[str] = []
        output.append(self._paint(f"\n📦 {_label(package_name, result.version)}", Fore.CYAN))

        self._format_dependencies(result, output)
        self._format_depended_by(result, output)

        output.append("\n" + "=" * 50 + "\n")
        return "\n".join(output)

    def _format_dependencies(self, result: AnalyzeResult, output: list[str]) -> None:
        for dep_type, heading, color in _DEPENDENCY_GROUPS:
            group = result.dependencies_of_type(dep_type)
            if not group:
                continue
            output.append(self._paint(f"\n{heading}", color))
            for dep in group:
                output.append(self._paint(f"  ├─ {dep.name}@{dep.version}", Fore.LIGHTBLACK_EX))

    def _format_depended_by(self, result: AnalyzeResult, output: list[str]) -> None:
        if not result.depended_by:
            output.append(self._paint("\nNo packages depend on this package", Fore.LIGHTBLACK_EX))
            return

        output.append(self._paint("\nDepended by:", Fore.MAGENTA))
        # Grouped by type: normal, then peer, then optional
        for dep_type, (color, suffix) in _DEPENDENT_STYLES.items():
            for dep in result.dependents_of_type(dep_type):
                output.append(self._paint(f"  ├─ {dep.name}@{dep.version}{suffix}", color))

    def format_dependency_chains(
        self, package_name: str, nodes: Sequence[DependencyChainNode]
    ) -> list[str]:
        """Render one line per chain, from the outermost dependent inwards."""
        if not nodes:
            return [self._paint("No dependency chains found", Fore.LIGHTBLACK_EX)]

        lines = [self._paint("Dependency chains:", Fore.GREEN)]
        for node in chain_leaves(nodes):
            hops = [_label(hop.name, hop.version) for hop in reversed(node.chain())]
            hops.append(package_name)
            lines.append("  " + self._paint(" → ".join(hops), Fore.LIGHTBLACK_EX))
        return lines
