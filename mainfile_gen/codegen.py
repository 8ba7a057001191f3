"""Render the @main Swift template and write it to disk.

The output path comes from the command line. The write goes through a temp
file in the destination directory so a killed run never leaves a truncated
file behind.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

import jinja2

from .arguments import InvocationArgs
from .context_builder import build_context
from .errors import WriteError

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "main.swift.j2"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_main_file(module_name: str, entry_type_name: str) -> str:
    """Render the entry-point file from the module and entry type names."""
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(**build_context(module_name, entry_type_name))


def render(args: InvocationArgs) -> str:
    """Render for parsed arguments; the output path plays no part."""
    return render_main_file(args.module_name, args.entry_type_name)


def _target_mode(path: Path) -> int:
    """Mode for the written file: the existing target's, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, content: str) -> None:
    """Write content to path via temp file + replace.

    Parent directories are not created; a missing parent is a WriteError.
    Content that cannot be encoded as UTF-8 (lone surrogates from non-UTF-8
    argv bytes) is a WriteError too, raised before anything touches disk.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteError(f"cannot write {str(path)!r}: content is not valid UTF-8 ({exc.reason})") from exc

    try:
        fd, tmp_path_str = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=path.suffix)
    except OSError as exc:
        raise WriteError(f"cannot write {str(path)!r}: {exc.strerror or exc}") from exc

    tmp_path = Path(tmp_path_str)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.chmod(tmp_path, _target_mode(path))
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise WriteError(f"cannot write {str(path)!r}: {exc.strerror or exc}") from exc
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def generate(args: InvocationArgs) -> None:
    """Render the template for args and write it to args.output_path."""
    write_atomic(args.output_path, render(args))
