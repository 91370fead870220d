from __future__ import annotations

import json

from scripts import show_results
from ingestion.service import ResultState


def test_main_renders_text_from_file(tmp_path, caixa_payload, capsys):
    payload_path = tmp_path / "draw.json"
    payload_path.write_text(json.dumps(caixa_payload), encoding="utf-8")

    exit_code = show_results.main(["--from-file", str(payload_path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Concurso 2735 • 08/06/2024" in output
    assert "Saiu!" in output
    assert "Dezenas: 04 13 22 35 41 60" in output
    assert "5 acertos: 112 apostas ganhadoras" in output


def test_main_prints_json_view(tmp_path, generic_payload, capsys):
    payload_path = tmp_path / "draw.json"
    payload_path.write_text(json.dumps(generic_payload), encoding="utf-8")

    exit_code = show_results.main(["--from-file", str(payload_path), "--json"])

    view = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert view["contest_number"] == 2700
    assert view["is_rolled_over"] is True


def test_main_reports_no_winners_for_rolled_over_jackpot(tmp_path, generic_payload, capsys):
    payload_path = tmp_path / "draw.json"
    payload_path.write_text(json.dumps(generic_payload), encoding="utf-8")

    show_results.main(["--from-file", str(payload_path)])

    assert "6 acertos: Não houve ganhadores" in capsys.readouterr().out


def test_main_fails_for_empty_payload(tmp_path):
    payload_path = tmp_path / "draw.json"
    payload_path.write_text("[]", encoding="utf-8")

    assert show_results.main(["--from-file", str(payload_path)]) == 1


def test_main_fails_for_unreadable_file(tmp_path):
    assert show_results.main(["--from-file", str(tmp_path / "missing.json")]) == 1


def test_main_uses_api_when_no_file_given(monkeypatch, caixa_payload):
    calls: list[int | None] = []

    def fake_load_results(*, contest=None):
        calls.append(contest)
        return ResultState(data=caixa_payload)

    monkeypatch.setattr(show_results, "load_results", fake_load_results)

    assert show_results.main(["--contest", "2735"]) == 0
    assert calls == [2735]
