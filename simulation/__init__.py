# simulation package initializer
# Nie importujemy nic "na siłę", żeby uniknąć pętli importów (models.team -> simulation.tactics).
# Konsument używa wprost: `from simulation.match import MatchEngine`

__all__ = [
    "match",
    "strength",
    "prediction",
    "preview",
    "tactics",
    "chemistry",
    "commentary",
    "feed",
    "stats",
    "config",
    "utils",
]
