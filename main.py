"""Command-line launcher that plays Counter Air games between two agents."""

import argparse

from agents import AgentSpec, registered_agent_types
from counter_air.config import GameConfig
from counter_air.core.types import Player
from game_runner import GameRunner, run_multiple_games
from infra.logger import configure_logging, get_logger


def _parse_args(argv=None) -> argparse.Namespace:
    agent_types = registered_agent_types()
    parser = argparse.ArgumentParser(description="Play Counter Air games between two agents.")
    parser.add_argument("--blue", default="random", choices=agent_types, help="Agent type for Blue (default: random)")
    parser.add_argument("--red", default="random", choices=agent_types, help="Agent type for Red (default: random)")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random agents (Red uses seed+1)")
    parser.add_argument("--env-file", default=None, help="dotenv file with COUNTER_AIR_* rule overrides")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--verbose", action="store_true", help="Log every move of a single game")
    return parser.parse_args(argv)


def _agent_spec(agent_type: str, player: Player, seed) -> AgentSpec:
    params = {}
    if agent_type == "random" and seed is not None:
        params["seed"] = seed + int(player)
    return AgentSpec(type=agent_type, player=player, init_params=params)


def main(argv=None) -> int:
    args = _parse_args(argv)

    # Configure logging once at startup.
    configure_logging(level=args.log_level, json=args.json_logs)
    log = get_logger(__name__)

    config = GameConfig.from_env(args.env_file)
    agents = [
        _agent_spec(args.blue, Player.BLUE, args.seed),
        _agent_spec(args.red, Player.RED, args.seed),
    ]

    if args.games == 1:
        runner = GameRunner(agents, config=config, verbose=args.verbose)
        runner.run()
        final = runner.get_final_frame().state
        log.info(
            "%s vs %s: %s (points %d-%d, hits %d-%d, %d moves)",
            args.blue,
            args.red,
            final.result.name,
            final.blue_points,
            final.red_points,
            final.blue_hits,
            final.red_hits,
            len(final.history),
        )
        return 0

    tally = run_multiple_games(agents, args.games, config=config)
    log.info("%s vs %s over %d games: %s", args.blue, args.red, args.games, tally)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
