"""
Tests for writing generated models and running the formatter.
"""

import subprocess
from unittest.mock import patch

import pytest

from pb_modelgen.codegen import GeneratedModel
from pb_modelgen.writer import WriterError, format_models, write_models


@pytest.fixture
def models():
    return [
        GeneratedModel("posts", "class PostsModel {}\n"),
        GeneratedModel("tags", "class TagsModel {}\n"),
    ]


class TestWriteModels:

    def test_one_file_per_model(self, tmp_path, models):
        written = write_models(models, tmp_path / "lib" / "models")

        assert [p.name for p in written] == ["posts.dart", "tags.dart"]
        assert written[0].read_text(encoding="utf-8") == "class PostsModel {}\n"

    def test_overwrites(self, tmp_path, models):
        (tmp_path / "posts.dart").write_text("old", encoding="utf-8")
        write_models(models, tmp_path)
        assert (tmp_path / "posts.dart").read_text(encoding="utf-8") == "class PostsModel {}\n"

    def test_output_is_a_file(self, tmp_path, models):
        target = tmp_path / "models"
        target.write_text("", encoding="utf-8")
        with pytest.raises(WriterError):
            write_models(models, target)


class TestFormatModels:

    def test_formatter_missing(self, tmp_path):
        with patch("pb_modelgen.writer.shutil.which", return_value=None), patch(
            "pb_modelgen.writer.subprocess.run"
        ) as run:
            assert format_models(tmp_path) is False
        run.assert_not_called()

    def test_formatter_runs(self, tmp_path):
        completed = subprocess.CompletedProcess(["dart"], 0, "", "")
        with patch("pb_modelgen.writer.shutil.which", return_value="/usr/bin/dart"), patch(
            "pb_modelgen.writer.subprocess.run", return_value=completed
        ) as run:
            assert format_models(tmp_path) is True
        assert run.call_args.args[0] == ["dart", "format", str(tmp_path)]

    def test_formatter_fails(self, tmp_path):
        completed = subprocess.CompletedProcess(["dart"], 65, "", "parse error")
        with patch("pb_modelgen.writer.shutil.which", return_value="/usr/bin/dart"), patch(
            "pb_modelgen.writer.subprocess.run", return_value=completed
        ):
            assert format_models(tmp_path) is False

    def test_formatter_oserror(self, tmp_path):
        with patch("pb_modelgen.writer.shutil.which", return_value="/usr/bin/dart"), patch(
            "pb_modelgen.writer.subprocess.run", side_effect=OSError("denied")
        ):
            assert format_models(tmp_path) is False
