"""Tests para el asistente interactivo (questionary simulado)."""

from unittest.mock import patch

import pytest
import typer

from floodpilot.cli.wizard import _validate_non_negative, _validate_positive, wizard


def _answers(mock_q, texts, soil="SU — Sand, schluffig", save=False):
    mock_q.text.return_value.ask.side_effect = texts
    mock_q.select.return_value.ask.return_value = soil
    mock_q.confirm.return_value.ask.return_value = save


class TestValidators:
    """Tests para validadores de entrada."""

    def test_positive(self):
        assert _validate_positive("2000") is True
        assert _validate_positive("0") == "Debe ser un numero positivo"
        assert _validate_positive("abc") == "Debe ser un numero valido"

    def test_non_negative(self):
        assert _validate_non_negative("0") is True
        assert _validate_non_negative("-1") == "Debe ser >= 0"
        assert _validate_non_negative("x") == "Debe ser un numero valido"


class TestWizard:
    """Tests para el flujo del asistente."""

    def test_full_flow(self, capsys):
        with patch("floodpilot.cli.wizard.questionary") as mock_q:
            _answers(mock_q, ["Halle 7", "2000", "1400", "2", "50", "0.015"])
            wizard()

        captured = capsys.readouterr()
        assert "Halle 7" in captured.out
        assert "NACHWEIS ERBRACHT" in captured.out

    def test_saves_text_report(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("FLOODPILOT_OUTPUT_DIR", str(tmp_path))

        with patch("floodpilot.cli.wizard.questionary") as mock_q:
            _answers(mock_q, ["Halle", "10000", "9000", "2", "50", "0.015"], soil="TL — Ton, leicht plastisch", save=True)
            wizard()

        files = list(tmp_path.glob("Ueberflutungsnachweis_Halle_*.txt"))
        assert len(files) == 1
        assert "Nachweis nicht erbracht" in files[0].read_text(encoding="utf-8")

    def test_cancel(self):
        with patch("floodpilot.cli.wizard.questionary") as mock_q:
            mock_q.text.return_value.ask.return_value = None
            with pytest.raises(typer.Exit):
                wizard()

    def test_invalid_combination_exits(self):
        """Superficie sellada mayor que la total."""
        with patch("floodpilot.cli.wizard.questionary") as mock_q:
            _answers(mock_q, ["", "1000", "1500", "2", "50", "0.015"])
            with pytest.raises(typer.Exit) as exc:
                wizard()
        assert exc.value.exit_code == 1
