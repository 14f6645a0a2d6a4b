"""Enumerations and default constants for the program engine.

Workout types form a closed set; every per-type behaviour (constraints,
presentation, metric selection) is a table lookup keyed by these members.
"""

from enum import IntEnum, auto


class WorkoutType(IntEnum):
    """Training methodology implemented by a single block."""

    # Traditional strength
    STRAIGHT_SETS = auto()
    SUPERSETS = auto()
    TRISETS = auto()
    GIANT_SETS = auto()
    DROP_SETS = auto()
    REST_PAUSE = auto()
    CLUSTER_SETS = auto()

    # Circuits
    CIRCUIT = auto()
    CIRCUIT_REPS = auto()
    CIRCUIT_TIME = auto()

    # CrossFit / functional
    WOD = auto()
    AMRAP = auto()
    FOR_TIME = auto()
    EMOM = auto()
    EMOM_2 = auto()
    EMOM_3 = auto()
    TABATA = auto()

    # Interval training
    HIIT = auto()
    INTERVAL_TRAINING = auto()
    FARTLEK = auto()

    # Powerlifting / strength
    PYRAMID = auto()
    REVERSE_PYRAMID = auto()
    WAVE_LOADING = auto()
    MAX_EFFORT = auto()
    DYNAMIC_EFFORT = auto()

    # Bodybuilding
    MECHANICAL_DROP_SET = auto()
    PRE_EXHAUSTION = auto()
    POST_EXHAUSTION = auto()

    # Endurance
    STEADY_STATE = auto()
    LISS = auto()
    TEMPO_RUNS = auto()

    # Olympic lifting / power
    COMPLEX_TRAINING = auto()
    CONTRAST_TRAINING = auto()

    # Specialised protocols
    DENSITY_TRAINING = auto()
    VOLUME_TRAINING = auto()
    LADDER_SETS = auto()
    DEATH_BY = auto()
    LADDER_CLIMB = auto()

    # Recovery
    ACTIVE_RECOVERY = auto()
    MOBILITY_SESSION = auto()

    CUSTOM = auto()

    @classmethod
    def parse(cls, value: "WorkoutType | str | None") -> "WorkoutType":
        """Resolve a member from a name, falling back to STRAIGHT_SETS.

        Accepts enum members, names in any case, and None.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        return cls.STRAIGHT_SETS


class WorkoutCategory(IntEnum):
    """Selection-menu grouping of workout types."""

    STRENGTH = auto()
    SUPERSETS = auto()
    CIRCUITS = auto()
    CROSSFIT = auto()
    HIIT = auto()
    BODYBUILDING = auto()
    ENDURANCE = auto()
    ADVANCED = auto()
    RECOVERY = auto()
    CUSTOM = auto()


class BlockType(IntEnum):
    """Coarse structural category of a block (persisted alongside WorkoutType)."""

    STRAIGHT_SETS = auto()
    SUPERSET = auto()
    TRISET = auto()
    GIANT_SET = auto()
    CIRCUIT = auto()
    EMOM = auto()
    TABATA = auto()
    AMRAP = auto()
    FOR_TIME = auto()
    COMPLEX = auto()
    LADDER = auto()
    PYRAMID = auto()
    WAVE = auto()
    CLUSTER = auto()
    REST_PAUSE = auto()
    DROP_SET = auto()
    MECHANICAL_DROP_SET = auto()
    DEATH_BY = auto()
    CUSTOM = auto()


class WeightUnit(IntEnum):
    KG = auto()
    LB = auto()


class MetricKind(IntEnum):
    """Workout-type-specific counters captured during execution."""

    ROUNDS = auto()           # generic round counter (AMRAP)
    CIRCUIT_ROUNDS = auto()
    EMOM_MINUTES = auto()     # completed + failed minute counters
    TABATA_ROUNDS = auto()
    WOD_RESULT = auto()       # free-text time or rounds+reps


class EmomCounter(IntEnum):
    COMPLETED = auto()
    FAILED = auto()


class ExecutionState(IntEnum):
    NOT_STARTED = auto()
    RUNNING = auto()
    FINISHED = auto()


class Period(IntEnum):
    """Look-back window for statistics."""

    WEEK = auto()
    MONTH = auto()
    YEAR = auto()
    ALL = auto()


# ---------------------------------------------------------------------------
# Builder defaults
# ---------------------------------------------------------------------------
DEFAULT_REST_BETWEEN_ITEMS_S = 60
DEFAULT_REST_AFTER_BLOCK_S = 120

# New items start at 3 x 10 with 60 s rest
DEFAULT_SETS = 3
DEFAULT_TARGET_REPS = 10
DEFAULT_ITEM_REST_S = 60
DEFAULT_WEIGHT_UNIT = WeightUnit.KG

DEFAULT_TOTAL_WEEKS = 4
MIN_TOTAL_WEEKS = 1
MAX_TOTAL_WEEKS = 52

# ---------------------------------------------------------------------------
# Execution / ratings
# ---------------------------------------------------------------------------
MIN_RATING = 1
MAX_RATING = 10

# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------
PERSONAL_RECORD_LIMIT = 5
RECENT_RESULTS_DAYS = 7
RECENT_RESULTS_LIMIT = 5

# Epley (1985) one-rep-max estimate: weight * (1 + reps / 30)
EPLEY_REP_DIVISOR = 30.0
