"""Source file discovery."""

import glob as globmod
import subprocess
from dataclasses import dataclass
from pathlib import Path

from guidelint.models import Language
from guidelint.syntax import LANGUAGE_EXTENSIONS, language_for


class FileError(Exception):
  """No lintable files could be resolved."""


@dataclass(frozen=True)
class SourceFile:
  """A file to scan, with the path shown in reports."""

  path: str
  absolute: Path
  language: Language

  def read(self) -> str:
    return self.absolute.read_text(encoding="utf-8")


def collect_sources(
  patterns: list[str],
  cwd: Path | None = None,
  no_ignore: bool = False,
) -> list[SourceFile]:
  """Resolve files, directories and glob patterns to lintable sources.

  Directories expand to every file with a supported extension. Files
  ignored by git (or under common vendor directories) are dropped
  unless no_ignore is set.

  Raises:
    FileError: If nothing lintable matched.
  """
  base_path = cwd or Path.cwd()
  expanded = _expand_directories(patterns, base_path)
  resolved = _resolve_patterns(expanded, base_path, no_ignore=no_ignore)

  sources = []
  for path in resolved:
    language = language_for(path.name)
    if language is not None:
      sources.append(SourceFile(_display_path(path, base_path), path, language))

  if not sources:
    raise FileError(_no_files_error(patterns))

  return sources


def _display_path(path: Path, base_path: Path) -> str:
  try:
    return path.relative_to(base_path).as_posix()
  except ValueError:
    return path.as_posix()


# Dependency and build output directories, skipped even when git tracks them
VENDOR_DIRS = frozenset([
  "node_modules",
  "bower_components",
  "jspm_packages",
  ".git",
  ".venv",
  "venv",
  "dist",
  "build",
  ".next",
  "coverage",
  "vendor",
])


def _repository_root(path: Path, roots: dict[Path, Path | None]) -> Path | None:
  """Nearest directory above path holding a `.git` entry, memoized per directory."""
  directory = path if path.is_dir() else path.parent
  visited: list[Path] = []
  root: Path | None = None
  for candidate in (directory, *directory.parents):
    if candidate in roots:
      root = roots[candidate]
      break
    visited.append(candidate)
    if (candidate / ".git").exists():
      root = candidate
      break
  for candidate in visited:
    roots[candidate] = root
  return root


def _drop_ignored(paths: list[Path]) -> list[Path]:
  """Drop files git ignores, then files under a vendor directory."""
  roots: dict[Path, Path | None] = {}
  by_root: dict[Path | None, list[Path]] = {}
  for path in paths:
    by_root.setdefault(_repository_root(path, roots), []).append(path)

  visible: set[Path] = set()
  for root, members in by_root.items():
    visible.update(members if root is None else _git_visible(members, root))

  return [p for p in paths if p in visible and VENDOR_DIRS.isdisjoint(p.parts)]


def _git_visible(paths: list[Path], root: Path) -> list[Path]:
  """Paths inside one repository that `git check-ignore` does not match.

  If git is unavailable or fails, every path is kept.
  """
  resolved_root = root.resolve()
  by_relative: dict[str, Path] = {}
  for path in paths:
    try:
      by_relative[path.resolve().relative_to(resolved_root).as_posix()] = path
    except ValueError:
      continue

  try:
    result = subprocess.run(
      ["git", "check-ignore", "--stdin", "-z"],
      cwd=root,
      input="\0".join(by_relative),
      capture_output=True,
      text=True,
    )
  except (OSError, subprocess.SubprocessError):
    return paths

  # status 1 means no path matched an ignore rule
  if result.returncode not in (0, 1):
    return paths

  ignored = set(filter(None, result.stdout.split("\0")))
  return [path for relative, path in by_relative.items() if relative not in ignored]


def _expand_directories(patterns: list[str], base_path: Path) -> list[str]:
  """Expand directories to recursive globs for every supported extension."""
  result: list[str] = []

  for pattern in patterns:
    p = Path(pattern)
    full_path = p if p.is_absolute() else base_path / p

    if full_path.is_dir():
      for extensions in LANGUAGE_EXTENSIONS.values():
        for ext in extensions:
          result.append(str(full_path / "**" / f"*.{ext}"))
    else:
      result.append(pattern)

  return result


def _resolve_patterns(
  patterns: list[str],
  base_path: Path,
  no_ignore: bool = False,
) -> list[Path]:
  """Expand glob patterns and return unique file paths."""
  seen: set[Path] = set()
  result: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path):
      if path not in seen and path.is_file():
        seen.add(path)
        result.append(path)

  if no_ignore:
    return result
  return _drop_ignored(result)


def _expand_pattern(pattern: str, base_path: Path) -> list[Path]:
  """Expand a single pattern to matching paths."""
  p = Path(pattern)
  glob_path = p if p.is_absolute() else base_path / p

  if any(c in pattern for c in "*?["):
    return sorted(Path(match) for match in globmod.glob(str(glob_path), recursive=True))
  return [glob_path]


def _no_files_error(patterns: list[str]) -> str:
  supported = ", ".join(
    f".{ext}" for extensions in LANGUAGE_EXTENSIONS.values() for ext in extensions
  )
  return (
    f"No lintable files matched: {', '.join(patterns)}\n"
    f"Supported extensions: {supported}"
  )
