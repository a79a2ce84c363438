"""Unit tests for the interactive prompts.

typer.prompt and typer.confirm are replaced with scripted fakes, so no
terminal is involved.
"""

import pytest

from wags_tags import prompts


@pytest.fixture
def scripted(monkeypatch):
    """Replaces typer.prompt with a fake returning the given answers in order.

    Returns the list of keyword arguments each prompt call received.
    """
    calls = []

    def feed(*values):
        iterator = iter(values)

        def prompt(text, **kwargs):
            calls.append(dict(kwargs, text=text))
            answer = next(iterator)
            default = kwargs.get("default")
            return default if answer == "" and default is not None else answer

        monkeypatch.setattr("typer.prompt", prompt)
        return calls
    return feed


class TestSelect:
    CHOICES = ["develop", "main", "qa"]

    def test_pick_by_number(self, scripted):
        scripted("2")
        assert prompts.select("Branch?", self.CHOICES) == "main"

    def test_pick_by_name(self, scripted):
        scripted("qa")
        assert prompts.select("Branch?", self.CHOICES) == "qa"

    def test_empty_answer_takes_default(self, scripted, capsys):
        calls = scripted("")

        assert prompts.select("Branch?", self.CHOICES, default="qa") == "qa"
        assert calls[0]["default"] == "3"
        assert " 3. qa (default)" in capsys.readouterr().out

    def test_reprompts_on_bad_answers(self, scripted, capsys):
        calls = scripted("0", "4", "abc", "1")

        assert prompts.select("Branch?", self.CHOICES) == "develop"
        assert len(calls) == 4
        out = capsys.readouterr().out
        assert out.count("out of range") == 2
        assert "invalid number" in out

    def test_no_default_outside_choices(self, scripted):
        calls = scripted("1")
        prompts.select("Branch?", self.CHOICES, default="release")
        assert calls[0]["default"] is None


class TestText:
    def test_default(self, scripted):
        calls = scripted("")

        assert prompts.text("Tag?", default="v1.0.0") == "v1.0.0"
        assert calls[0]["show_default"]

    def test_empty_allowed_without_default(self, scripted):
        calls = scripted("")

        assert prompts.text("Tag?") == ""
        assert calls[0]["default"] == ""
        assert not calls[0]["show_default"]

    def test_answer_is_stripped(self, scripted):
        scripted("  v1.0.0-dev ")
        assert prompts.text("Tag?") == "v1.0.0-dev"

    def test_reprompts_until_valid(self, scripted, capsys):
        calls = scripted("", "bogus", "v1.0.0")

        answer = prompts.text("Tag?", validate=lambda tag: None if tag.startswith("v") else "Invalid tag format!")

        assert answer == "v1.0.0"
        assert len(calls) == 3
        assert capsys.readouterr().out.count("Invalid tag format!") == 2


class TestConfirm:
    @pytest.mark.parametrize("default", [True, False])
    def test_delegates_to_typer(self, monkeypatch, default):
        seen = {}

        def confirm(text, default=False, **kwargs):
            seen["text"], seen["default"] = text, default
            return True

        monkeypatch.setattr("typer.confirm", confirm)

        assert prompts.confirm("Proceed?", default=default) is True
        assert seen == {"text": "Proceed?", "default": default}
