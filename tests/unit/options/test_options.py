"""Option scanning, flag precedence, and target resolution tests."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from minils.entries import EntryKind
from minils.errors import HELP_HINT, ArgumentParseError, InvalidOption, MissingOption, PathError
from minils.options import (
    DirectoryTarget,
    DisplayMode,
    EntryTarget,
    FilterPolicy,
    Layout,
    OptionsBuilder,
    resolve_arguments,
)


def resolve(*args: str):
    return resolve_arguments(["minils", *args])


class DefaultsTests(unittest.TestCase):
    def test_no_arguments_lists_current_directory_in_grid(self) -> None:
        options, target = resolve()

        self.assertEqual(options.display, DisplayMode(layout=Layout.GRID, recurse=False))
        self.assertEqual(options.filters, FilterPolicy())
        self.assertEqual(target, DirectoryTarget(Path(".")))

    def test_display_mode_predicates_follow_layout(self) -> None:
        long_mode = DisplayMode(layout=Layout.LONG)
        self.assertTrue(long_mode.long)
        self.assertTrue(long_mode.line_per_entry)
        self.assertFalse(long_mode.grid)

        oneline = DisplayMode(layout=Layout.ONELINE)
        self.assertFalse(oneline.long)
        self.assertTrue(oneline.line_per_entry)

        self.assertTrue(DisplayMode().grid)
        self.assertFalse(DisplayMode().line_per_entry)


class LayoutPrecedenceTests(unittest.TestCase):
    def test_last_layout_flag_wins(self) -> None:
        options, _target = resolve("--grid", "--long")
        self.assertIs(options.display.layout, Layout.LONG)

        options, _target = resolve("--long", "--grid")
        self.assertIs(options.display.layout, Layout.GRID)

        options, _target = resolve("-l1")
        self.assertIs(options.display.layout, Layout.ONELINE)

    def test_long_and_short_forms_agree(self) -> None:
        for long_form, short_form in (("--oneline", "-1"), ("--long", "-l"), ("--grid", "-G")):
            with self.subTest(flag=long_form):
                self.assertEqual(resolve(long_form)[0], resolve(short_form)[0])

    def test_recurse_is_recorded_and_clears_grid(self) -> None:
        options, _target = resolve("-R")
        self.assertTrue(options.display.recurse)
        self.assertIs(options.display.layout, Layout.ONELINE)

        options, _target = resolve("--long", "--recurse")
        self.assertTrue(options.display.recurse)
        self.assertIs(options.display.layout, Layout.LONG)


class FilterPrecedenceTests(unittest.TestCase):
    def test_only_dirs_then_all_keeps_all(self) -> None:
        options, _target = resolve("--only-dirs", "--all")
        self.assertTrue(options.filters.only_dirs)
        self.assertTrue(options.filters.all)

        options, _target = resolve("-Da")
        self.assertTrue(options.filters.only_dirs)
        self.assertTrue(options.filters.all)

    def test_only_flags_clear_all_when_applied_after_it(self) -> None:
        for args in (("-aD",), ("--all", "--only-dirs"), ("-af",), ("--all", "--only-files")):
            with self.subTest(args=args):
                options, _target = resolve(*args)
                self.assertFalse(options.filters.all)

    def test_only_dirs_and_only_files_are_mutually_exclusive(self) -> None:
        options, _target = resolve("-Df")
        self.assertFalse(options.filters.only_dirs)
        self.assertTrue(options.filters.only_files)

        options, _target = resolve("--only-files", "--only-dirs")
        self.assertTrue(options.filters.only_dirs)
        self.assertFalse(options.filters.only_files)

    def test_list_dirs_combines_with_only_flags(self) -> None:
        options, _target = resolve("-dD")
        self.assertEqual(options.filters, FilterPolicy(list_dirs=True, only_dirs=True))

    def test_builder_rejects_unknown_flag_name(self) -> None:
        with self.assertRaises(ValueError):
            OptionsBuilder().apply("sideways")


class OptionErrorTests(unittest.TestCase):
    def test_unknown_long_option_names_argument_and_hints_help(self) -> None:
        with self.assertRaises(InvalidOption) as exc_info:
            resolve("--bogus")

        self.assertEqual(exc_info.exception.option, "--bogus")
        self.assertTrue(str(exc_info.exception).startswith("--bogus: Invalid option."))
        self.assertTrue(str(exc_info.exception).endswith(HELP_HINT))

    def test_bad_character_in_cluster_fails_like_bad_long_option(self) -> None:
        with self.assertRaises(InvalidOption) as exc_info:
            resolve("-laz")

        self.assertEqual(exc_info.exception.option, "z")
        self.assertEqual(str(exc_info.exception), f"z: Invalid option. {HELP_HINT}")

    def test_bare_dash_is_missing_option(self) -> None:
        with self.assertRaises(MissingOption) as exc_info:
            resolve("-")
        self.assertTrue(str(exc_info.exception).endswith(HELP_HINT))

    def test_help_and_version_are_not_cluster_characters(self) -> None:
        for args in (("-l?",), ("-av",), ("--help", "-l")):
            with self.subTest(args=args), self.assertRaises(InvalidOption):
                resolve(*args)

    def test_positional_before_last_argument_is_rejected(self) -> None:
        with self.assertRaises(ArgumentParseError) as exc_info:
            resolve("somewhere", "-l")
        self.assertEqual(exc_info.exception.argument, "somewhere")
        self.assertTrue(str(exc_info.exception).startswith("Error parsing option."))


class TargetResolutionTests(unittest.TestCase):
    def test_trailing_directory_is_enumerated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            options, target = resolve("-a", tmp)

            self.assertTrue(options.filters.all)
            self.assertEqual(target, DirectoryTarget(Path(tmp)))

    def test_trailing_directory_with_list_dirs_becomes_single_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _options, target = resolve("-d", tmp)

            self.assertIsInstance(target, EntryTarget)
            self.assertEqual(target.entry.name, tmp)
            self.assertIs(target.entry.kind, EntryKind.DIRECTORY)

    def test_trailing_file_becomes_single_entry_with_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target_file = Path(tmp) / "notes.txt"
            target_file.write_text("x" * 42, encoding="utf-8")
            os.chmod(target_file, 0o640)

            _options, target = resolve("-l", str(target_file))

            self.assertIsInstance(target, EntryTarget)
            self.assertEqual(target.entry.name, str(target_file))
            self.assertIs(target.entry.kind, EntryKind.FILE)
            self.assertEqual(target.entry.size, 42)
            self.assertEqual(target.entry.mode, 0o640)

    def test_trailing_symlink_keeps_link_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            real = Path(tmp) / "real.txt"
            real.write_text("hi", encoding="utf-8")
            link = Path(tmp) / "link.txt"
            link.symlink_to(real)

            _options, target = resolve(str(link))

            self.assertIsInstance(target, EntryTarget)
            self.assertIs(target.entry.kind, EntryKind.SYMLINK)
            self.assertEqual(target.entry.link_target, str(real))

    def test_trailing_symlink_to_directory_is_enumerated(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            subdir = Path(tmp) / "sub"
            subdir.mkdir()
            link = Path(tmp) / "sub-link"
            link.symlink_to(subdir, target_is_directory=True)

            _options, target = resolve(str(link))

            self.assertEqual(target, DirectoryTarget(link))

    def test_empty_argument_is_not_treated_as_current_directory(self) -> None:
        with self.assertRaises(PathError) as exc_info:
            resolve("-d", "")

        self.assertIn("No such file or directory", str(exc_info.exception))

    def test_trailing_slash_after_file_is_path_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            regular = Path(tmp) / "f.txt"
            regular.write_text("", encoding="utf-8")

            with self.assertRaises(PathError) as exc_info:
                resolve(f"{regular}/")

            self.assertIn("Not a directory", str(exc_info.exception))

    def test_directory_target_skips_single_entry_lookup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            subdir = Path(tmp) / "sub"
            subdir.mkdir()
            link = Path(tmp) / "sub-link"
            link.symlink_to(subdir, target_is_directory=True)

            with mock.patch("minils.options.entry_from_path") as entry_from_path:
                _options, dir_target = resolve(tmp)
                _options, link_target = resolve(str(link))

            entry_from_path.assert_not_called()
            self.assertEqual(dir_target, DirectoryTarget(Path(tmp)))
            self.assertEqual(link_target, DirectoryTarget(link))

    def test_missing_path_is_path_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "nope")
            with self.assertRaises(PathError) as exc_info:
                resolve(missing)

            self.assertIn("No such file or directory", str(exc_info.exception))

    def test_options_after_positional_position_are_not_possible(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ArgumentParseError):
                resolve(tmp, "-a")


if __name__ == "__main__":
    unittest.main()
