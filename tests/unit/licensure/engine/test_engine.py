# SPDX-License-Identifier: MPL-2.0
"""Tests for classifying files and computing their licensed content."""
import builtins
import io
import re

import pytest

from licensure.comments import LineComment
from licensure.config import Config
from licensure.engine import (
    AlreadyLicensed,
    Licensure,
    NeedsUpdate,
    NoCommenterMatched,
    NoConfigMatched,
    add_header,
    get_outdated_replacement,
    get_replaces_replacement,
)
from licensure.errors import LicensureError
from licensure.template import Template

HELLO = """
def main():
    print('hello world')

if __name__ == '__main__':
    main()
"""

CONFIG_WITH_REPLACES = r"""
excludes: []
licenses:
  - files: any
    ident: TESTING
    authors:
      - name: The Tester
    template: "New Test License [name of author]\nOnly For Testing"
    replaces:
      - "(# *)?Before replacement\n?"
comments:
  - columns: 80
    extensions:
      - py
    commenter:
      type: line
      comment_char: "#"
"""

CONFIG_NO_COMMENTERS = r"""
excludes: []
licenses:
  - files: any
    ident: TESTING
    authors:
      - name: The Tester
    template: "New Test License [name of author]\nOnly For Testing"
comments: []
"""

CONFIG_YEARLY = r"""
change_in_place: {in_place}
excludes:
  - vendor/.*
licenses:
  - files: .*\.py$
    ident: MIT
    year: "2024"
    authors:
      - name: The Tester
    template: "License [year]\n\ntext"
comments:
  - extension: py
    commenter:
      type: line
      comment_char: "#"
"""


def header_for(template: Template, commenter: LineComment) -> str:
    return commenter.comment(template.render())


def test_detects_outdated_year(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    commenter = LineComment("#")
    header = header_for(template, commenter)

    result = get_outdated_replacement(
        template, commenter, None, "# License 2020\n#\n# text", header
    )
    assert result is not None


def test_detects_outdated_year_range(test_context):
    template = Template("License [year]\n\ntext", test_context("2024", start_year="2020"))
    commenter = LineComment("#")
    header = header_for(template, commenter)

    result = get_outdated_replacement(
        template, commenter, None, "# License 2020, 2023\n#\n# text", header
    )
    assert result == "# License 2020, 2024\n#\n# text"


def test_detects_outdated_year_range_when_previous_header_wasnt_a_range(test_context):
    template = Template("License [year]\n\ntext", test_context("2024", start_year="2020"))
    commenter = LineComment("#")
    header = header_for(template, commenter)

    result = get_outdated_replacement(
        template, commenter, None, "# License 2020\n#\n# text", header
    )
    assert result is not None


def test_detects_outdated_year_trailing_whitespace(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    commenter = LineComment("#")
    header = header_for(template, commenter)

    result = get_outdated_replacement(
        template, commenter, None, "# License 2020\n#\n# text\n", header
    )
    assert result == "# License 2024\n#\n# text\n"


def test_outdated_replacement_keeps_surrounding_text(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    commenter = LineComment("#")
    header = header_for(template, commenter)
    content = "#!/bin/sh\n# License 2019\n#\n# text\necho hi\n# License 2018\n#\n# text\n"

    result = get_outdated_replacement(template, commenter, None, content, header)
    # Only the first header is replaced.
    assert result == "#!/bin/sh\n# License 2024\n#\n# text\necho hi\n# License 2018\n#\n# text\n"


def test_no_outdated_replacement_for_unrelated_text(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    commenter = LineComment("#")
    header = header_for(template, commenter)

    assert get_outdated_replacement(template, commenter, None, "print('x')\n", header) is None


def test_detects_replaces(test_context):
    replaces = [
        re.compile("This first regex is not going to hit"),
        re.compile(r"(// *)?foo \(C\) .* another thing\n?"),
    ]
    template = Template("License [year]\n\ntext", test_context("2024"))
    header = header_for(template, LineComment("//"))

    result = get_replaces_replacement(
        replaces, "BEFORE// foo (C) fill fill fill another thing\nAFTER", header
    )
    assert result == "BEFORE// License 2024\n//\n// text\nAFTER"


def test_replacement_header_is_inserted_literally():
    header = r"# Copyright \1 \g<0> C:\path" + "\n"
    result = get_replaces_replacement([re.compile("(old)")], "old\n", header)
    assert result == header + "\n"


def test_add_header(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    header = header_for(template, LineComment("#"))

    assert add_header(header, HELLO) == "# License 2024\n#\n# text\n" + HELLO


def test_add_header_handles_shebang(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    header = header_for(template, LineComment("#"))
    content = "#!/usr/bin/env python3\n" + HELLO

    assert add_header(header, content) == (
        "#!/usr/bin/env python3\n# License 2024\n#\n# text\n" + HELLO
    )


def test_add_header_ignores_shebang_in_middle_of_file(test_context):
    template = Template("License [year]\n\ntext", test_context("2024"))
    header = header_for(template, LineComment("#"))
    content = "\ndef main():\n    pass\n\n#!/usr/bin/env python3\n"

    assert add_header(header, content) == "# License 2024\n#\n# text\n" + content


def test_add_license_header_with_replaces(make_config):
    licensure = Licensure(make_config(CONFIG_WITH_REPLACES))
    content = "\n# Before replacement" + HELLO

    result = licensure.add_license_header("test_file.py", content)

    assert result == NeedsUpdate("\n# New Test License The Tester Only For Testing" + HELLO)
    assert licensure.stats.files_needing_license_update == ["test_file.py"]


def test_add_license_header_no_commenter(make_config):
    licensure = Licensure(make_config(CONFIG_NO_COMMENTERS))
    content = "\n// Before replacement\n# include somefile.h\n"

    assert licensure.add_license_header("test_file.c", content) == NoCommenterMatched()


def test_no_license_config_matched(make_config):
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="false")))
    assert licensure.add_license_header("main.rs", "fn main() {}\n") == NoConfigMatched()


def test_already_licensed(make_config):
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="false")))
    content = "# License 2024\n#\n# text\nimport os\n"

    assert licensure.add_license_header("a.py", content) == AlreadyLicensed()
    assert licensure.stats.files_needing_license_update == []


def test_already_licensed_without_trailing_newline(make_config):
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="false")))
    assert licensure.add_license_header("a.py", "# License 2024\n#\n# text") == AlreadyLicensed()


def test_outdated_year_concrete_scenario(make_config):
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="false")))
    result = licensure.add_license_header("a.py", "# License 2020\n#\n# text")
    assert result == NeedsUpdate("# License 2024\n#\n# text")


def test_missing_trailing_blank_lines_needs_update(make_config):
    config = make_config(
        CONFIG_YEARLY.format(in_place="false").replace(
            'comment_char: "#"', 'comment_char: "#"\n      trailing_lines: 2'
        )
    )
    licensure = Licensure(config)
    content = "# License 2024\n#\n# text\nimport os\n"

    # The exact header including its blank lines is absent but the trimmed
    # form is present, which counts as licensed.
    assert licensure.add_license_header("a.py", content) == AlreadyLicensed()

    result = licensure.add_license_header("b.py", "# License 2021\n#\n# text\nimport os\n")
    assert result == NeedsUpdate("# License 2024\n#\n# text\nimport os\n")


def test_update_is_idempotent(make_config):
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="false")))
    for content in ("# License 2019\n#\n# text\nx = 1\n", "#!/usr/bin/env python3\nx = 1\n", ""):
        first = licensure.add_license_header("a.py", content)
        assert isinstance(first, NeedsUpdate)
        assert licensure.add_license_header("a.py", first.content) == AlreadyLicensed()


def test_license_files_in_place(make_config, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "script.py").write_text("#!/usr/bin/env python3\nprint('hi')\n", encoding="utf-8")
    (tmp_path / "old.py").write_text("# License 2001\n#\n# text\nx = 1\n", encoding="utf-8")
    (tmp_path / "done.py").write_text("# License 2024\n#\n# text\n", encoding="utf-8")
    (tmp_path / "main.c").write_text("int main;\n", encoding="utf-8")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "lib.py").write_text("x = 2\n", encoding="utf-8")

    config = make_config(CONFIG_YEARLY.format(in_place="true"))
    stats = Licensure(config).license_files(
        ["script.py", "old.py", "done.py", "main.c", "vendor/lib.py"]
    )

    assert stats.files_needing_license_update == ["script.py", "old.py"]
    assert stats.files_not_licensed == ["main.c"]
    assert stats.files_needing_commenter == []
    assert (tmp_path / "script.py").read_text(encoding="utf-8") == (
        "#!/usr/bin/env python3\n# License 2024\n#\n# text\nprint('hi')\n"
    )
    assert (tmp_path / "old.py").read_text(encoding="utf-8") == "# License 2024\n#\n# text\nx = 1\n"
    assert (tmp_path / "vendor" / "lib.py").read_text(encoding="utf-8") == "x = 2\n"


def test_license_files_prints_when_not_in_place(make_config, tmp_path):
    target = tmp_path / "a.py"
    target.write_text("x = 1\n", encoding="utf-8")
    out = io.StringIO()

    Licensure(make_config(CONFIG_YEARLY.format(in_place="false")), output=out).license_files(
        [str(target)]
    )

    assert out.getvalue() == "# License 2024\n#\n# text\nx = 1\n"
    assert target.read_text(encoding="utf-8") == "x = 1\n"


def test_check_mode_changes_nothing(make_config, tmp_path):
    target = tmp_path / "a.py"
    target.write_text("x = 1\n", encoding="utf-8")
    out = io.StringIO()

    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="true")), output=out)
    stats = licensure.with_check_mode(True).license_files([str(target)])

    assert stats.files_needing_license_update == [str(target)]
    assert out.getvalue() == ""
    assert target.read_text(encoding="utf-8") == "x = 1\n"


def test_no_commenter_recorded_in_both_lists(make_config, tmp_path):
    target = tmp_path / "main.c"
    target.write_text("int main;\n", encoding="utf-8")

    stats = Licensure(make_config(CONFIG_NO_COMMENTERS)).license_files([str(target)])

    assert stats.files_not_licensed == [str(target)]
    assert stats.files_needing_commenter == [str(target)]
    assert stats.files_needing_license_update == []
    assert target.read_text(encoding="utf-8") == "int main;\n"


def test_stats_reset_between_batches(make_config, tmp_path):
    target = tmp_path / "main.c"
    target.write_text("int main;\n", encoding="utf-8")
    licensure = Licensure(make_config(CONFIG_NO_COMMENTERS))

    licensure.license_files([str(target)])
    stats = licensure.license_files([])

    assert stats.files_not_licensed == []
    assert stats.files_needing_commenter == []


def test_missing_file_aborts_batch(make_config, tmp_path):
    later = tmp_path / "later.py"
    later.write_text("x = 1\n", encoding="utf-8")
    missing = str(tmp_path / "missing.py")
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="true")))

    with pytest.raises(LicensureError) as excinfo:
        licensure.license_files([missing, str(later)])

    assert excinfo.value.context == f"failed to open file {missing}"
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert later.read_text(encoding="utf-8") == "x = 1\n"


def test_uncreatable_file_aborts_batch(make_config, tmp_path, monkeypatch):
    first = tmp_path / "a.py"
    second = tmp_path / "b.py"
    first.write_text("x = 1\n", encoding="utf-8")
    second.write_text("y = 2\n", encoding="utf-8")
    denied = PermissionError(13, "Permission denied", str(first))
    real_open = builtins.open

    def guarded_open(file, mode="r", *args, **kwargs):
        if "w" in mode and str(file) == str(first):
            raise denied
        return real_open(file, mode, *args, **kwargs)

    monkeypatch.setattr(builtins, "open", guarded_open)
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="true")))

    with pytest.raises(LicensureError) as excinfo:
        licensure.license_files([str(first), str(second)])

    assert excinfo.value.context == f"failed to create file {first}"
    assert excinfo.value.cause is denied
    assert excinfo.value.__cause__ is denied
    assert first.read_text(encoding="utf-8") == "x = 1\n"
    assert second.read_text(encoding="utf-8") == "y = 2\n"


def test_failed_write_is_reported(make_config, tmp_path, monkeypatch):
    target = tmp_path / "a.py"
    target.write_text("x = 1\n", encoding="utf-8")
    full = OSError(28, "No space left on device")
    real_open = builtins.open

    class FullDisk(io.StringIO):
        def write(self, text):
            raise full

    def guarded_open(file, mode="r", *args, **kwargs):
        if "w" in mode and str(file) == str(target):
            return FullDisk()
        return real_open(file, mode, *args, **kwargs)

    monkeypatch.setattr(builtins, "open", guarded_open)
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="true")))

    with pytest.raises(LicensureError) as excinfo:
        licensure.license_files([str(target)])

    assert excinfo.value.context == f"failed to write to file {target}"
    assert excinfo.value.cause is full
    assert str(excinfo.value).startswith(f"failed to write to file {target}: ")


def test_undecodable_file_is_a_read_error(make_config, tmp_path):
    target = tmp_path / "bin.py"
    target.write_bytes(b"\xff\xfe\x00")
    licensure = Licensure(make_config(CONFIG_YEARLY.format(in_place="true")))

    with pytest.raises(LicensureError, match="failed to read file"):
        licensure.license_files([str(target)])


def test_default_config_has_no_licenses():
    stats = Licensure(Config.default()).license_files([])
    assert stats.files_not_licensed == []
