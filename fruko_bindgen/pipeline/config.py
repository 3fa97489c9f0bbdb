"""
Configuration for the bindgen pipeline.

Holds the generator options read from a JSON config file or the command
line, and the read-only CompilationInfo record handed to every backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..version import __version__

GENERATED_FROM_COMMENT = "This file has been generated from '{source_file_name}'"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite the existing file


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the generated code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Add the "generated from" comment as the first preamble line
    add_generation_comment: bool = True

    # Add a comment with the generator version and command line
    add_command_line_comment: bool = False

    # Extra preamble lines, in order, after the generation comment
    preamble_comments: list[str] = field(default_factory=list)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "preamble_comments":
                config.preamble_comments = list(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "add_command_line_comment": self.add_command_line_comment,
            "preamble_comments": list(self.preamble_comments),
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }


@dataclass(frozen=True)
class CompilationInfo:
    """Information about the compilation, used for header banners.

    Attributes:
        source_file_name: Name of the data definition file
        preamble_comments: Comment lines to put at the top of the output, in order
    """

    source_file_name: str = ""
    preamble_comments: tuple[str, ...] = ()

    @staticmethod
    def build(
        source_file_name: str,
        config: GeneratorConfig | None = None,
        command_line: str | None = None,
    ) -> CompilationInfo:
        """
        Assemble the compilation info for a source file.

        Args:
            source_file_name: Name of the data definition file
            config: Generator configuration (defaults if None)
            command_line: Command line to mention when add_command_line_comment is set

        Returns:
            CompilationInfo with the preamble lines in output order
        """
        config = config or GeneratorConfig()
        comments: list[str] = []

        if config.add_generation_comment:
            comments.append(GENERATED_FROM_COMMENT.format(source_file_name=source_file_name))

        comments.extend(config.preamble_comments)

        if config.add_command_line_comment:
            comments.append(f"Generated by fruko_bindgen v{__version__} : {command_line or 'fruko_bindgen'}")

        return CompilationInfo(source_file_name=source_file_name, preamble_comments=tuple(comments))
