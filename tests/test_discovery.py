"""Tests for valuesforge.discovery.walker."""

from __future__ import annotations

import logging
import os

import pytest

from valuesforge.discovery import walker
from valuesforge.discovery.walker import discover_documents, is_candidate


class TestIsCandidate:
    @pytest.mark.parametrize("name", ["deploy.yaml", "svc.yml", "a.b.yaml"])
    def test_accepts_template_extensions(self, name):
        assert is_candidate(name, (".yaml", ".yml"), "values.yaml")

    @pytest.mark.parametrize("name", ["README.md", "deploy.yaml.bak", "yaml", "x.YAML"])
    def test_rejects_other_names(self, name):
        assert not is_candidate(name, (".yaml", ".yml"), "values.yaml")

    def test_rejects_values_file(self):
        assert not is_candidate("values.yaml", (".yaml",), "values.yaml")


class TestDiscoverDocuments:
    def test_finds_nested_templates_sorted(self, make_root):
        root = make_root(
            {
                "values.yaml": "a: 1\n",
                "z.yaml": "",
                "a.yml": "",
                "sub/b.yaml": "",
                "sub/deeper/c.yaml": "",
                "notes.txt": "",
            }
        )
        found = discover_documents(root)
        assert found == sorted(found)
        assert {p.relative_to(root).as_posix() for p in found} == {
            "z.yaml",
            "a.yml",
            "sub/b.yaml",
            "sub/deeper/c.yaml",
        }

    def test_values_file_excluded_at_every_depth(self, make_root):
        root = make_root(
            {"values.yaml": "", "nested/values.yaml": "", "nested/d.yaml": ""}
        )
        found = discover_documents(root)
        assert [p.name for p in found] == ["d.yaml"]

    def test_directories_with_template_suffix_are_not_candidates(self, make_root):
        root = make_root({"values.yaml": "", "dir.yaml/inner.yaml": ""})
        found = discover_documents(root)
        assert [p.relative_to(root).as_posix() for p in found] == ["dir.yaml/inner.yaml"]

    def test_custom_extensions(self, make_root):
        root = make_root({"values.yaml": "", "a.tpl": "", "b.yaml": ""})
        found = discover_documents(root, extensions=(".tpl",))
        assert [p.name for p in found] == ["a.tpl"]

    def test_empty_root(self, tmp_path):
        assert discover_documents(tmp_path) == []

    def test_traversal_error_is_logged_and_skipped(self, make_root, monkeypatch, caplog):
        root = make_root({"values.yaml": "", "ok.yaml": ""})
        real_walk = os.walk

        def flaky_walk(top, onerror=None, **kwargs):
            onerror(PermissionError(13, "Permission denied", str(root / "locked")))
            yield from real_walk(top, onerror=onerror, **kwargs)

        monkeypatch.setattr(walker.os, "walk", flaky_walk)
        with caplog.at_level(logging.WARNING, logger="valuesforge.discovery.walker"):
            found = discover_documents(root)

        assert [p.name for p in found] == ["ok.yaml"]
        assert "Permission denied" in caplog.text
        assert "locked" in caplog.text

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission bits are ignored for root",
    )
    def test_unreadable_subdirectory_is_skipped(self, make_root):
        root = make_root({"values.yaml": "", "ok.yaml": "", "locked/hidden.yaml": ""})
        locked = root / "locked"
        locked.chmod(0o000)
        try:
            found = discover_documents(root)
        finally:
            locked.chmod(0o755)
        assert [p.name for p in found] == ["ok.yaml"]
