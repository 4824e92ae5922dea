"""Headless run - seeded ecosystem with a periodic census and replay check.

Runs the simulator without a display, printing per-species counts every
``--every`` ticks. With ``--replay`` a second simulator built from the same
seed is run alongside and the two snapshots are compared at the end.

Run: python examples/headless.py --seed 42 --ticks 500
"""

import argparse
import logging

from ecosim import SimulationConfig, Simulator, Species


def census(sim: Simulator, every: int):
    def observer(tick, grid, progress, cycle_length):
        if tick % every != 0:
            return
        counts = sim.counts()
        line = "  ".join(f"{s.value}={counts[s]:<5}" for s in Species)
        print(f"[tick {tick:>5}  day {progress:4.2f}]  {line}")
    return observer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--ticks", type=int, default=500)
    parser.add_argument("--depth", type=int, default=70)
    parser.add_argument("--width", type=int, default=120)
    parser.add_argument("--every", type=int, default=50)
    parser.add_argument("--long", action="store_true", help="run the long simulation")
    parser.add_argument("--replay", action="store_true", help="verify determinism")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.create(depth=args.depth, width=args.width)
    sim = Simulator(config, seed=args.seed)
    sim.add_observer(census(sim, args.every))
    print(f"=== Ecosystem (seed={sim.seed}, {config.depth}x{config.width}) ===\n")

    ran = sim.run_long() if args.long else sim.run(args.ticks)

    print(f"\nRan {ran} ticks, final tick {sim.tick_number}")
    stats = sim.stats
    totals = {c.name.lower(): n for c, n in stats.deaths_by_cause().items()}
    print(f"Deaths by cause: {totals}")
    for species in Species:
        deaths = {
            cause.name.lower(): n
            for (kind, cause), n in stats.deaths.items() if kind is species
        }
        print(
            f"  {species.value:<9} alive={sim.counts()[species]:<5} "
            f"born={stats.births[species]:<6} migrated={stats.introductions[species]:<4} "
            f"deaths={deaths}"
        )

    if args.replay:
        twin = Simulator(config, seed=args.seed)
        twin.run(ran)
        assert twin.snapshot() == sim.snapshot(), "Replay mismatch"
        print("\nReplay proof: PASSED (both runs identical)")


if __name__ == "__main__":
    main()
