from abc import ABC, abstractmethod
from pathlib import Path

from discover_actions.domain_model import MetadataRecord, ParsedManifest
from discover_actions.globals.problems import Problem, ProblemLevel


class OutputFormatter(ABC):
    """Interface for formatting CLI output."""

    @abstractmethod
    def format_root_header(self, root: Path) -> str:
        """Format header for a root being scanned."""
        pass

    @abstractmethod
    def format_manifest(self, manifest: ParsedManifest) -> str:
        """Format an action found through its manifest."""
        pass

    @abstractmethod
    def format_docker_action(self, record: MetadataRecord) -> str:
        """Format an action found through Dockerfile labels."""
        pass

    @abstractmethod
    def format_problem(self, problem: Problem) -> str:
        pass

    @abstractmethod
    def format_no_actions(self) -> str:
        pass

    @abstractmethod
    def format_readme(self, readme: str) -> str:
        """Format the note that the repository README was fetched."""
        pass

    @abstractmethod
    def format_summary(
        self, total_actions: int, total_errors: int, total_warnings: int, max_level: ProblemLevel
    ) -> str:
        """Format final summary of all scan results."""
        pass


class ColoredFormatter(OutputFormatter):
    """
    Colored console output formatter.

    Formats CLI output with ANSI color codes and consistent spacing.
    Used as the default formatter for interactive terminal sessions.
    """

    STYLE = {
        ProblemLevel.NON: {"color_bold": "\033[1;92m", "color": "\033[92m", "sign": "✓"},
        ProblemLevel.ERR: {"color_bold": "\033[1;31m", "color": "\033[31m", "sign": "✗"},
        ProblemLevel.WAR: {"color_bold": "\033[1;33m", "color": "\033[33m", "sign": "⚠"},
    }

    DEF_STYLE = {
        "format_end": "\033[0m",
        "neutral": "\033[2m",
        "underline": "\033[4m",
        "bold": "\033[1m",
    }

    def format_root_header(self, root: Path) -> str:
        return f'\n{self.DEF_STYLE["underline"]}{root}{self.DEF_STYLE["format_end"]}'

    def format_manifest(self, manifest: ParsedManifest) -> str:
        record = manifest.record
        lines = [self._format_record_line(record, f"manifest, {record.runtime_kind}")]
        for action in manifest.steps.referenced_actions:
            lines.append(f'      {self.DEF_STYLE["neutral"]}uses{self.DEF_STYLE["format_end"]} {action}')
        for name in manifest.steps.shell_steps:
            lines.append(
                f'      {self.DEF_STYLE["neutral"]}run{self.DEF_STYLE["format_end"]}  {name or "-"}'
            )
        return "\n".join(lines)

    def format_docker_action(self, record: MetadataRecord) -> str:
        return self._format_record_line(record, "dockerfile")

    def format_problem(self, problem: Problem) -> str:
        """Format problem with colors and the file it belongs to."""
        line = f'  {self.DEF_STYLE["neutral"]}{problem.file or "-"}{self.DEF_STYLE["format_end"]}'
        line += max(40 - len(line), 0) * " "

        style = self.STYLE[problem.level]
        name = "error" if problem.level == ProblemLevel.ERR else "warning"
        line += f'{style["color"]}{name}{self.DEF_STYLE["format_end"]}  '
        line += problem.desc

        if problem.rule:
            line += f'  {self.DEF_STYLE["neutral"]}({problem.rule}){self.DEF_STYLE["format_end"]}'
        return line

    def format_no_actions(self) -> str:
        return f'  {self.DEF_STYLE["neutral"]}No actions found{self.DEF_STYLE["format_end"]}'

    def format_readme(self, readme: str) -> str:
        return f'  {self.DEF_STYLE["neutral"]}README fetched ({len(readme)} characters, base64){self.DEF_STYLE["format_end"]}'

    def format_summary(
        self, total_actions: int, total_errors: int, total_warnings: int, max_level: ProblemLevel
    ) -> str:
        """Format colored summary with counts."""
        style = self.STYLE[max_level]
        return (
            f'\n{style["color_bold"]}{style["sign"]} {total_actions} actions found '
            f'({total_errors} errors, {total_warnings} warnings){self.DEF_STYLE["format_end"]}\n'
        )

    def _format_record_line(self, record: MetadataRecord, kind: str) -> str:
        line = f'  {self.DEF_STYLE["bold"]}{record.name or "-"}{self.DEF_STYLE["format_end"]}'
        line += f' {self.DEF_STYLE["neutral"]}({kind}) {record.path or ""}{self.DEF_STYLE["format_end"]}'
        if record.description:
            line += f"\n      {record.description}"
        return line
