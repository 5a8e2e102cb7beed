"""Bash completion file generator"""
import os
from pathlib import Path
from typing import Iterable, List

from .catalog import CommandCatalog
from .config import GeneratorConfig
from .logger import Logger
from ..utils.classifiers import Classification
from ..utils.formatters import (
    format_completion_function,
    format_generated_by,
    format_license_header,
    format_registration,
)


class BashCompletionGenerator:
    """Render a catalog into a bash completion script"""

    def __init__(self, catalog: CommandCatalog, config: GeneratorConfig | None = None):
        self.catalog = catalog
        self.config = config or GeneratorConfig()
        self.classification = Classification(catalog.all_options)

    def render(self, header_lines: Iterable[str]) -> List[str]:
        """Build every line of the script in memory"""
        lines = format_license_header(header_lines)
        lines += format_generated_by(
            self.catalog.command_description, type(self).__name__)
        lines += format_completion_function(
            self.catalog, self.classification, self.config.function_name)
        lines += format_registration(
            self.config.function_name, self.catalog.command_name)
        return lines

    def generate_file(self, to: Path, header_file: Path) -> Path:
        """
        Write the completion script to `to`

        Reading the header or writing the output raises OSError on failure;
        nothing is written unless the whole script was rendered.
        """
        Logger.info(f"writing bash completion file to {to}")
        header_lines = header_file.read_text(encoding="utf-8").splitlines()
        contents = os.linesep.join(self.render(header_lines))

        if self.config.create_parent_dirs:
            to.parent.mkdir(parents=True, exist_ok=True)

        Logger.verbose_log(f"{len(self.catalog.base_commands)} commands, "
                           f"{len(self.catalog.all_options)} distinct options")
        with open(to, "w", encoding="utf-8", newline="") as f:
            f.write(contents)
        return to
