import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from app.schemas import ResultView
from app.services.presenter import ResultUnavailableError, present_state
from ingestion.service import ResultState, load_results


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show a Mega-Sena draw result")
    parser.add_argument("--contest", type=int, default=None, help="Contest number (defaults to the latest draw)")
    parser.add_argument(
        "--from-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Read a raw results payload from a JSON file instead of calling the API",
    )
    parser.add_argument("--json", action="store_true", help="Print the result view as JSON")
    return parser.parse_args(argv)


def _load_state(args: argparse.Namespace) -> ResultState:
    if args.from_file is None:
        return load_results(contest=args.contest)
    try:
        payload = json.loads(args.from_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        return ResultState(error=f"Cannot read {args.from_file}: {exc}")
    return ResultState(data=payload)


def render_text(view: ResultView) -> str:
    lines = [
        f"Concurso {view.contest_number} • {view.draw_date}",
        view.status,
    ]
    if view.draw_location_name or view.draw_location_region:
        lines.append(
            f"Sorteio realizado no {view.draw_location_name or '-'} em {view.draw_location_region or '-'}"
        )
    lines.append("Dezenas: " + " ".join(f"{number:02d}" for number in view.winning_numbers))
    estimate_label = " ".join(
        part for part in ("Estimativa de prêmio do próximo concurso", view.next_contest_date) if part
    )
    lines.append(f"{estimate_label}: {view.next_contest_estimated_prize}")
    lines.append(f"Acumulado próximo concurso: {view.next_contest_accumulated_prize}")
    lines.append(
        f"Acumulado final zero/cinco (concurso {view.zero_five_contest_number or '-'}): "
        f"{view.zero_five_accumulated_prize}"
    )
    lines.append(f"Acumulado para Mega da Virada: {view.special_accumulated_prize}")
    lines.append("Premiação:")
    for tier in view.prize_tiers:
        if tier.hit_count == 6 and not tier.has_winners:
            lines.append(f"  {tier.label}: Não houve ganhadores")
        else:
            lines.append(f"  {tier.label}: {tier.winner_count} apostas ganhadoras, {tier.prize_amount}")
    lines.append(f"Arrecadação total: {view.total_collected}")
    lines.append(f"Buscar por concurso: {view.search_url}")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    state = _load_state(args)
    try:
        view = present_state(state)
    except ResultUnavailableError as exc:
        logger.error("Ops! Algo deu errado: {}", exc)
        return 1
    if view is None:
        logger.error("No draw result available")
        return 1

    if args.json:
        print(view.model_dump_json(indent=2))
    else:
        print(render_text(view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
