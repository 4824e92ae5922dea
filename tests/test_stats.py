"""Tests for SimulationStats tallies."""

from ecosim import Agent, DeathCause, Grid, Location, ScriptedRandom, SimulationStats, Species


def _agent(grid, species, col):
    return Agent(species, grid, Location(0, col), ScriptedRandom())


def test_records_births_per_species():
    grid = Grid(1, 3)
    stats = SimulationStats()
    stats.record_births([
        _agent(grid, Species.FROG, 0),
        _agent(grid, Species.FROG, 1),
        _agent(grid, Species.BIRD, 2),
    ])
    assert stats.births[Species.FROG] == 2
    assert stats.births[Species.BIRD] == 1
    assert stats.births[Species.SNAKE] == 0


def test_records_deaths_by_species_and_cause():
    grid = Grid(1, 3)
    a = _agent(grid, Species.HEDGEHOG, 0)
    b = _agent(grid, Species.HEDGEHOG, 1)
    c = _agent(grid, Species.COYOTE, 2)
    a.die(DeathCause.EATEN)
    b.die(DeathCause.EATEN)
    c.die(DeathCause.STARVATION)

    stats = SimulationStats()
    stats.record_deaths([a, b, c])
    assert stats.deaths[(Species.HEDGEHOG, DeathCause.EATEN)] == 2
    assert stats.deaths_by_cause() == {DeathCause.EATEN: 2, DeathCause.STARVATION: 1}


def test_live_agents_are_not_counted_as_deaths():
    grid = Grid(1, 1)
    stats = SimulationStats()
    stats.record_deaths([_agent(grid, Species.FROG, 0)])
    assert not stats.deaths


def test_clear_and_to_dict():
    grid = Grid(1, 1)
    frog = _agent(grid, Species.FROG, 0)
    stats = SimulationStats()
    stats.record_births([frog])
    stats.introductions[Species.SNAKE] += 3
    frog.die(DeathCause.DISEASE)
    stats.record_deaths([frog])

    assert stats.to_dict() == {
        "births": {"frog": 1},
        "introductions": {"snake": 3},
        "deaths": {"frog:disease": 1},
    }
    stats.clear()
    assert stats.to_dict() == {"births": {}, "introductions": {}, "deaths": {}}
