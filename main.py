"""Command-line interface for Pokemon team analysis and recommendations."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from poke_team.analysis import TeamRecommendationService
from poke_team.clients import PokeAPIClient, PokeAPIClientError
from poke_team.data.type_chart import type_profile
from poke_team.services import TeamBuilderService, load_roster


def _humanize_report(report: dict[str, object]) -> str:
    lines: list[str] = []
    analysis = report.get("analysis") or {}
    if analysis:
        lines.append(
            f"Score {analysis['overall_score']}/100 (grade {analysis['grade']}), "
            f"archetype: {analysis['archetype']}"
        )
        lines.append(
            f"Defense {analysis['defensive_rating']:g} | Offense {analysis['offensive_rating']:g}"
            f" | Core {analysis['core_strength']:.1f}"
        )
        lines.append("")

    weakness_report = report.get("weakness_report") or {}
    critical = weakness_report.get("critical_weaknesses", []) or []
    if critical:
        lines.append("Shared weaknesses:")
        for weakness in critical:
            lines.append(
                f"  - {weakness['type']} x{weakness['count']}: {', '.join(weakness['pokemon'])}"
            )
        lines.append("")

    gaps = weakness_report.get("coverage_gaps", []) or []
    if gaps:
        lines.append(f"Coverage gaps: {', '.join(gaps)}")
        lines.append("")

    for title, key in (("Strengths", "strengths"), ("Weaknesses", "weaknesses")):
        notes = analysis.get(key, []) if analysis else []
        if notes:
            lines.append(f"{title}:")
            lines.extend(f"  - {note}" for note in notes)
            lines.append("")

    tips = weakness_report.get("recommendations", []) or []
    if tips:
        lines.append("Type advice:")
        lines.extend(f"  - {tip}" for tip in tips)
        lines.append("")

    recs = report.get("recommendations", []) or []
    if recs:
        lines.append("Recommendations:")
        lines.extend(_humanize_recommendation(rec) for rec in recs)

    return "\n".join(lines).strip()


def _humanize_recommendation(rec: dict[str, object]) -> str:
    pokemon = rec["pokemon"]
    action = "add" if rec["action"] == "add" else f"swap slot {rec['swap_slot'] + 1}"
    benefits = ", ".join(rec.get("benefits", [])) or "no listed benefits"
    return f"  - [{rec['score']}] {action}: {pokemon['name']} :: {rec['reason']} ({benefits})"


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def _emit(payload: object, as_json: bool, text: str) -> None:
    if as_json:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze and improve Pokemon teams")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Score a team of up to six Pokemon")
    analyze.add_argument("pokemon", nargs="*", help="Pokemon names or National Dex ids")
    analyze.add_argument(
        "--recommend",
        type=int,
        default=0,
        metavar="N",
        help="Also include up to N recommendations",
    )

    recommend = sub.add_parser("recommend", help="Suggest additions and swaps")
    recommend.add_argument("pokemon", nargs="*", help="Pokemon names or National Dex ids")
    recommend.add_argument("--max", type=int, default=6, help="Maximum suggestions")

    types = sub.add_parser("types", help="Show the matchup profile of a typing")
    types.add_argument("types", nargs="+", help="One or two types")

    search = sub.add_parser("search", help="Search Pokemon by name")
    search.add_argument("query")

    moves = sub.add_parser("moves", help="Search moves by name")
    moves.add_argument("query")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _debug_print(args.debug, f"Arguments parsed: {args}")

    if args.command == "types":
        profile = type_profile(args.types)
        text = "\n".join(f"{key}: {', '.join(values) or '-'}" for key, values in profile.items())
        _emit(profile, args.json, text)
        return 0

    client = PokeAPIClient()
    logger = lambda msg: _debug_print(args.debug, msg)  # noqa: E731
    service = TeamBuilderService(
        recommender=TeamRecommendationService(pokeapi_client=client, debug_logger=logger),
        debug_logger=logger,
    )

    try:
        if args.command == "search":
            found = client.search_pokemon(args.query)
            _emit(
                [asdict(p) for p in found],
                args.json,
                "\n".join(f"#{p.id} {p.name} ({'/'.join(p.types)})" for p in found) or "No matches",
            )
            return 0

        if args.command == "moves":
            found = client.search_moves(args.query)
            _emit(
                [asdict(m) for m in found],
                args.json,
                "\n".join(
                    f"{m.display_name} [{m.type}/{m.damage_class}] power={m.power}: {m.effect}"
                    for m in found
                )
                or "No matches",
            )
            return 0

        if len(args.pokemon) > 6:
            raise SystemExit("A team holds at most 6 Pokemon.")
        roster = load_roster(client, args.pokemon)
        _debug_print(args.debug, f"Loaded {len(roster.members())} Pokemon")
    except PokeAPIClientError as exc:
        raise SystemExit(f"PokeAPI request failed: {exc}")

    if args.command == "recommend":
        recs = service.recommend(roster, args.max)
        _emit(
            [asdict(rec) for rec in recs],
            args.json,
            "\n".join(_humanize_recommendation(asdict(rec)) for rec in recs) or "No recommendations",
        )
        return 0

    report = service.analyze(roster)
    if args.recommend:
        report.recommendations = service.recommend(roster, args.recommend)
    payload = asdict(report)
    _emit(payload, args.json, _humanize_report(payload))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
