"""Workout-type registry: constraint rules and display metadata per WorkoutType.

Both lookups are total over the closed WorkoutType set. Unknown or missing
input resolves to STRAIGHT_SETS rather than failing. Display metadata is
presentation only and never consulted during validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from program_engine.models.enums import (
    BlockType,
    MetricKind,
    WorkoutCategory,
    WorkoutType,
)


@dataclass(frozen=True)
class WorkoutTypeConstraints:
    """Structural rules for a block of a given workout type.

    Attributes:
        min_exercises: Advisory minimum, checked at save time.
        max_exercises: Hard cap enforced when adding items; None = unbounded.
        exercise_label: What an item is called ("exercise", "station", ...).
        requires_rounds: Block needs ``total_rounds`` (minutes for EMOM).
        requires_amrap_duration: Block needs ``amrap_duration_seconds``.
        requires_intervals: Block needs work/rest interval timing.
    """

    min_exercises: int
    max_exercises: int | None
    exercise_label: str
    description: str
    guidance: tuple[str, ...] = field(default_factory=tuple)
    requires_rounds: bool = False
    requires_amrap_duration: bool = False
    requires_intervals: bool = False

    @property
    def is_unbounded(self) -> bool:
        return self.max_exercises is None

    @property
    def is_fixed_count(self) -> bool:
        return self.max_exercises is not None and self.min_exercises == self.max_exercises

    def can_add(self, current_count: int) -> bool:
        """True if one more item fits under the maximum."""
        return self.max_exercises is None or current_count < self.max_exercises

    def is_satisfied_by(self, count: int) -> bool:
        if count < self.min_exercises:
            return False
        return self.max_exercises is None or count <= self.max_exercises


@dataclass(frozen=True)
class WorkoutTypeInfo:
    """Presentation metadata: name, blurb, icon key and accent colour."""

    display_name: str
    description: str
    icon: str
    color: str
    category: WorkoutCategory


# ---------------------------------------------------------------------------
# Constraint table
# ---------------------------------------------------------------------------

WORKOUT_TYPE_CONSTRAINTS: dict[WorkoutType, WorkoutTypeConstraints] = {
    # --- Traditional strength ---
    WorkoutType.STRAIGHT_SETS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Complete all sets of one exercise before moving to the next",
        guidance=(
            "Add exercises",
            "Set reps and weight for each exercise",
            "Configure rest between exercises",
        ),
    ),
    WorkoutType.SUPERSETS: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        description="Alternate between 2 exercises with minimal rest",
        guidance=(
            "Must have exactly 2 exercises",
            "Perform back-to-back with minimal rest",
            "Rest after completing both",
        ),
    ),
    WorkoutType.TRISETS: WorkoutTypeConstraints(
        min_exercises=3, max_exercises=3, exercise_label="exercise",
        description="Rotate through 3 exercises consecutively",
        guidance=(
            "Must have exactly 3 exercises",
            "Perform all 3 back-to-back",
            "Rest after completing the tri-set",
        ),
    ),
    WorkoutType.GIANT_SETS: WorkoutTypeConstraints(
        min_exercises=4, max_exercises=None, exercise_label="exercise",
        description="Perform 4+ exercises consecutively with minimal rest",
        guidance=(
            "Minimum 4 exercises required",
            "Complete all exercises before resting",
            "Great for muscle endurance",
        ),
    ),
    WorkoutType.DROP_SETS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Reduce weight immediately after reaching failure",
        guidance=(
            "Perform set to failure",
            "Immediately drop weight 20-25%",
            "Continue to failure again",
        ),
    ),
    WorkoutType.REST_PAUSE: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Short rest periods within a set",
        guidance=(
            "Perform reps to near failure",
            "Rest 10-15 seconds",
            "Continue for additional reps",
        ),
    ),
    WorkoutType.CLUSTER_SETS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Short rests between small rep clusters",
        guidance=(
            "Break set into small clusters (2-3 reps)",
            "Rest 10-20s between clusters",
            "Maintain heavy weight",
        ),
    ),

    # --- Circuits ---
    WorkoutType.CIRCUIT: WorkoutTypeConstraints(
        min_exercises=3, max_exercises=None, exercise_label="station",
        requires_rounds=True,
        description="Move through stations for multiple rounds",
        guidance=(
            "Add 3+ exercises as stations",
            "Set total rounds in block config",
            "Configure rest between stations and after rounds",
        ),
    ),
    WorkoutType.CIRCUIT_REPS: WorkoutTypeConstraints(
        min_exercises=3, max_exercises=None, exercise_label="station",
        requires_rounds=True,
        description="Rep-based circuit training",
        guidance=(
            "Add 3+ exercises",
            "Set rep targets for each exercise",
            "Complete specified rounds",
        ),
    ),
    WorkoutType.CIRCUIT_TIME: WorkoutTypeConstraints(
        min_exercises=3, max_exercises=None, exercise_label="station",
        requires_rounds=True, requires_intervals=True,
        description="Timed circuit with work/rest intervals",
        guidance=(
            "Add 3+ exercises",
            "Set work intervals in block config",
            "Set rest intervals between stations",
        ),
    ),

    # --- CrossFit / functional ---
    WorkoutType.WOD: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="CrossFit Workout of the Day",
        guidance=(
            "Can combine multiple workout types",
            "Follow specific WOD programming",
            "Track time or rounds",
        ),
    ),
    WorkoutType.AMRAP: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_amrap_duration=True,
        description="As Many Rounds As Possible in set time",
        guidance=(
            "Set AMRAP duration in block config",
            "Add exercises with rep targets",
            "Complete as many rounds as possible",
        ),
    ),
    WorkoutType.FOR_TIME: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_rounds=True,
        description="Complete prescribed work as fast as possible",
        guidance=(
            "Set total rounds if applicable",
            "Complete all work as quickly as possible",
            "Time the entire workout",
        ),
    ),
    # EMOM variants reuse total_rounds as total minutes
    WorkoutType.EMOM: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        requires_rounds=True,
        description="Every Minute On the Minute - single exercise",
        guidance=(
            "One exercise per block",
            "Set total minutes in rounds",
            "Complete reps at start of each minute",
        ),
    ),
    WorkoutType.EMOM_2: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        requires_rounds=True,
        description="EMOM alternating between 2 exercises",
        guidance=(
            "Exactly 2 exercises",
            "Set total minutes in rounds",
            "Alternate exercises each minute",
        ),
    ),
    WorkoutType.EMOM_3: WorkoutTypeConstraints(
        min_exercises=3, max_exercises=3, exercise_label="exercise",
        requires_rounds=True,
        description="EMOM rotating through 3 exercises",
        guidance=(
            "Exactly 3 exercises",
            "Set total minutes in rounds",
            "Rotate through exercises each minute",
        ),
    ),
    WorkoutType.TABATA: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_intervals=True,
        description="20s work, 10s rest for 8 rounds (4 min)",
        guidance=(
            "Typically 20s work / 10s rest",
            "Standard is 8 rounds (4 minutes)",
            "Set work/rest phases in config",
        ),
    ),

    # --- Interval training ---
    WorkoutType.HIIT: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_intervals=True,
        description="High Intensity Interval Training",
        guidance=(
            "Set work and rest intervals",
            "Maximum effort during work phase",
            "Active recovery during rest",
        ),
    ),
    WorkoutType.INTERVAL_TRAINING: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_intervals=True,
        description="Structured work/rest intervals",
        guidance=(
            "Configure work/rest intervals",
            "Set total rounds",
            "Maintain consistent effort",
        ),
    ),
    WorkoutType.FARTLEK: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        description="Speed play - varied pace training",
        guidance=(
            "Running exercise",
            "Alternate fast and slow periods",
            "Unstructured speed changes",
        ),
    ),

    # --- Powerlifting / strength ---
    WorkoutType.PYRAMID: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Increase then decrease reps/weight each set",
        guidance=(
            "Start light/high reps",
            "Increase weight/decrease reps",
            "Reverse back down the pyramid",
        ),
    ),
    WorkoutType.REVERSE_PYRAMID: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Start heavy, decrease weight/increase reps",
        guidance=(
            "Start with heaviest set",
            "Decrease weight each set",
            "Can increase reps as weight decreases",
        ),
    ),
    WorkoutType.WAVE_LOADING: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Wavelike pattern of weight/reps",
        guidance=(
            "Strength exercise",
            "Example: 5-3-2, 5-3-2 reps",
            "Increase weight each wave",
        ),
    ),
    WorkoutType.MAX_EFFORT: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Maximum weight for low reps (1-3)",
        guidance=(
            "Heavy compound movements",
            "1-3 reps per set",
            "Long rest periods (3-5 min)",
        ),
    ),
    WorkoutType.DYNAMIC_EFFORT: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Explosive speed work with submaximal load",
        guidance=(
            "50-60% of 1RM",
            "Maximum bar speed",
            "Multiple sets of 2-3 reps",
        ),
    ),

    # --- Bodybuilding ---
    WorkoutType.MECHANICAL_DROP_SET: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=3, exercise_label="variation",
        description="Change exercise angle to continue set",
        guidance=(
            "1-3 exercise variations",
            "Same muscle group, different angles",
            "Move to easier variation when fatigued",
        ),
    ),
    WorkoutType.PRE_EXHAUSTION: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        description="Isolation then compound movement",
        guidance=(
            "Exactly 2 exercises",
            "First: Isolation exercise",
            "Second: Compound movement",
        ),
    ),
    WorkoutType.POST_EXHAUSTION: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        description="Compound then isolation movement",
        guidance=(
            "Exactly 2 exercises",
            "First: Compound movement",
            "Second: Isolation exercise",
        ),
    ),

    # --- Endurance ---
    WorkoutType.STEADY_STATE: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        description="Maintain consistent pace/intensity",
        guidance=(
            "Single exercise (usually cardio)",
            "Set duration or distance",
            "Keep steady, sustainable pace",
        ),
    ),
    WorkoutType.LISS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        description="Low Intensity Steady State cardio",
        guidance=(
            "Single cardio exercise",
            "Low intensity (60-70% max HR)",
            "Extended duration (30-60 min)",
        ),
    ),
    WorkoutType.TEMPO_RUNS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        description="Running at comfortably hard pace",
        guidance=(
            "Running exercise only",
            "Pace: 80-90% of max effort",
            "Duration: 20-40 minutes",
        ),
    ),

    # --- Olympic lifting / power ---
    WorkoutType.COMPLEX_TRAINING: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        description="Heavy strength + explosive power movement",
        guidance=(
            "Exactly 2 exercises",
            "First: Heavy strength (e.g., squat)",
            "Second: Explosive power (e.g., jump squat)",
        ),
    ),
    WorkoutType.CONTRAST_TRAINING: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=2, exercise_label="exercise",
        description="Alternate heavy and light loads",
        guidance=(
            "Exactly 2 exercises",
            "Same movement pattern",
            "Alternate heavy and light sets",
        ),
    ),

    # --- Specialised protocols ---
    WorkoutType.DENSITY_TRAINING: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        requires_amrap_duration=True,
        description="Maximum volume in set timeframe",
        guidance=(
            "Set time limit",
            "Complete as much work as possible",
            "Focus on total volume",
        ),
    ),
    WorkoutType.VOLUME_TRAINING: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="High total volume for muscle growth",
        guidance=(
            "Multiple sets (8-12+)",
            "Moderate weight",
            "Focus on total volume",
        ),
    ),
    WorkoutType.LADDER_SETS: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Progressively increase or decrease reps",
        guidance=(
            "Ascending: 1,2,3,4... reps",
            "Or descending: 10,9,8,7... reps",
            "Rest between sets",
        ),
    ),
    WorkoutType.DEATH_BY: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=1, exercise_label="exercise",
        description="Add 1 rep each minute until failure",
        guidance=(
            "One exercise only",
            "Minute 1: 1 rep, Minute 2: 2 reps, etc.",
            "Continue until you can't finish in the minute",
        ),
    ),
    WorkoutType.LADDER_CLIMB: WorkoutTypeConstraints(
        min_exercises=2, max_exercises=None, exercise_label="exercise",
        description="Multiple exercises with changing rep scheme",
        guidance=(
            "2+ exercises",
            "Coordinated rep changes",
            "Example: Ex1 increases, Ex2 decreases",
        ),
    ),

    # --- Recovery ---
    WorkoutType.ACTIVE_RECOVERY: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="activity",
        description="Light movement to aid recovery",
        guidance=(
            "Low intensity movement",
            "Improve blood flow",
            "Reduce muscle soreness",
        ),
    ),
    WorkoutType.MOBILITY_SESSION: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="movement",
        description="Flexibility and mobility work",
        guidance=(
            "Stretching and mobility drills",
            "Hold positions 30-60s",
            "Focus on range of motion",
        ),
    ),

    WorkoutType.CUSTOM: WorkoutTypeConstraints(
        min_exercises=1, max_exercises=None, exercise_label="exercise",
        description="Custom workout type",
        guidance=(
            "Design your own workout structure",
            "Add exercises as needed",
            "Configure rest periods",
        ),
    ),
}


# ---------------------------------------------------------------------------
# Display metadata (icon keys are Material icon names)
# ---------------------------------------------------------------------------

_S, _SS, _C, _X = (
    WorkoutCategory.STRENGTH,
    WorkoutCategory.SUPERSETS,
    WorkoutCategory.CIRCUITS,
    WorkoutCategory.CROSSFIT,
)
_H, _B, _E, _A, _R = (
    WorkoutCategory.HIIT,
    WorkoutCategory.BODYBUILDING,
    WorkoutCategory.ENDURANCE,
    WorkoutCategory.ADVANCED,
    WorkoutCategory.RECOVERY,
)

WORKOUT_TYPE_INFO: dict[WorkoutType, WorkoutTypeInfo] = {
    WorkoutType.STRAIGHT_SETS: WorkoutTypeInfo(
        "Straight Sets", "Traditional sets with rest between", "fitness-center", "#007AFF", _S),
    WorkoutType.SUPERSETS: WorkoutTypeInfo(
        "Supersets", "Two exercises performed back-to-back without rest", "swap-horiz", "#5856D6", _SS),
    WorkoutType.TRISETS: WorkoutTypeInfo(
        "Trisets", "Three exercises performed consecutively", "view-week", "#AF52DE", _SS),
    WorkoutType.GIANT_SETS: WorkoutTypeInfo(
        "Giant Sets", "Four or more exercises performed consecutively", "view-module", "#8E44AD", _SS),
    WorkoutType.DROP_SETS: WorkoutTypeInfo(
        "Drop Sets", "Reduce weight and continue without rest", "trending-down", "#E67E22", _B),
    WorkoutType.REST_PAUSE: WorkoutTypeInfo(
        "Rest-Pause", "Brief rest periods within a set", "pause-circle-outline", "#D35400", _B),
    WorkoutType.CLUSTER_SETS: WorkoutTypeInfo(
        "Cluster Sets", "Mini-rest periods within sets", "grain", "#C0392B", _B),
    WorkoutType.CIRCUIT: WorkoutTypeInfo(
        "Circuit Training", "Stations of exercises with timed intervals", "repeat", "#4ECDC4", _C),
    WorkoutType.CIRCUIT_REPS: WorkoutTypeInfo(
        "Circuit (Rep-Based)", "Circuit based on repetitions", "repeat-one", "#45B7AA", _C),
    WorkoutType.CIRCUIT_TIME: WorkoutTypeInfo(
        "Circuit (Time-Based)", "Circuit based on time intervals", "av-timer", "#3AA39A", _C),
    WorkoutType.WOD: WorkoutTypeInfo(
        "Workout of the Day", "CrossFit-style workout", "whatshot", "#FF6B6B", _X),
    WorkoutType.AMRAP: WorkoutTypeInfo(
        "AMRAP", "As Many Rounds/Reps As Possible", "loop", "#FF9F43", _X),
    WorkoutType.FOR_TIME: WorkoutTypeInfo(
        "For Time", "Complete workout as fast as possible", "timer", "#EE5A24", _X),
    WorkoutType.EMOM: WorkoutTypeInfo(
        "EMOM", "Every Minute on the Minute", "schedule", "#00BCD4", _X),
    WorkoutType.EMOM_2: WorkoutTypeInfo(
        "E2MOM", "Every 2 Minutes on the Minute", "schedule", "#00ACC1", _X),
    WorkoutType.EMOM_3: WorkoutTypeInfo(
        "E3MOM", "Every 3 Minutes on the Minute", "schedule", "#0097A7", _X),
    WorkoutType.TABATA: WorkoutTypeInfo(
        "Tabata", "20 seconds work, 10 seconds rest", "flash-on", "#E74C3C", _H),
    WorkoutType.HIIT: WorkoutTypeInfo(
        "HIIT", "High-Intensity Interval Training", "flash-auto", "#FF3B30", _H),
    WorkoutType.INTERVAL_TRAINING: WorkoutTypeInfo(
        "Interval Training", "Work/rest intervals", "timelapse", "#F39C12", _H),
    WorkoutType.FARTLEK: WorkoutTypeInfo(
        "Fartlek", "Speed play with varying intensities", "directions-run", "#27AE60", _E),
    WorkoutType.PYRAMID: WorkoutTypeInfo(
        "Pyramid Sets", "Increasing then decreasing weight/reps", "change-history", "#2980B9", _S),
    WorkoutType.REVERSE_PYRAMID: WorkoutTypeInfo(
        "Reverse Pyramid", "Decreasing weight, increasing reps", "details", "#3498DB", _S),
    WorkoutType.WAVE_LOADING: WorkoutTypeInfo(
        "Wave Loading", "Undulating loads within session", "waves", "#1ABC9C", _S),
    WorkoutType.MAX_EFFORT: WorkoutTypeInfo(
        "Max Effort", "Working up to 1-3RM", "trending-up", "#2C3E50", _S),
    WorkoutType.DYNAMIC_EFFORT: WorkoutTypeInfo(
        "Dynamic Effort", "Speed/explosive work", "bolt", "#F1C40F", _S),
    WorkoutType.MECHANICAL_DROP_SET: WorkoutTypeInfo(
        "Mechanical Drop Set", "Change exercise angle/leverage", "rotate-right", "#E59866", _B),
    WorkoutType.PRE_EXHAUSTION: WorkoutTypeInfo(
        "Pre-Exhaustion", "Isolation then compound", "battery-alert", "#A04000", _B),
    WorkoutType.POST_EXHAUSTION: WorkoutTypeInfo(
        "Post-Exhaustion", "Compound then isolation", "battery-charging-full", "#935116", _B),
    WorkoutType.STEADY_STATE: WorkoutTypeInfo(
        "Steady State", "Consistent pace/intensity", "trending-flat", "#16A085", _E),
    WorkoutType.LISS: WorkoutTypeInfo(
        "LISS", "Low-Intensity Steady State", "directions-walk", "#48C9B0", _E),
    WorkoutType.TEMPO_RUNS: WorkoutTypeInfo(
        "Tempo Runs", "Comfortably hard pace", "speed", "#229954", _E),
    WorkoutType.COMPLEX_TRAINING: WorkoutTypeInfo(
        "Complex Training", "Heavy lift + explosive movement", "layers", "#6C3483", _A),
    WorkoutType.CONTRAST_TRAINING: WorkoutTypeInfo(
        "Contrast Training", "Heavy + light + explosive", "compare-arrows", "#7D3C98", _A),
    WorkoutType.DENSITY_TRAINING: WorkoutTypeInfo(
        "Density Training", "More work in same time", "compress", "#884EA0", _A),
    WorkoutType.VOLUME_TRAINING: WorkoutTypeInfo(
        "Volume Training", "High volume accumulation", "equalizer", "#9B59B6", _A),
    WorkoutType.LADDER_SETS: WorkoutTypeInfo(
        "Ladder Sets", "Ascending/descending rep schemes", "stairs", "#5D6D7E", _A),
    WorkoutType.DEATH_BY: WorkoutTypeInfo(
        "Death By", "Add one rep each minute until failure", "hourglass-empty", "#922B21", _X),
    WorkoutType.LADDER_CLIMB: WorkoutTypeInfo(
        "Ladder Climb", "1, 2, 3, 4... reps", "signal-cellular-alt", "#566573", _A),
    WorkoutType.ACTIVE_RECOVERY: WorkoutTypeInfo(
        "Active Recovery", "Low-intensity movement", "self-improvement", "#58D68D", _R),
    WorkoutType.MOBILITY_SESSION: WorkoutTypeInfo(
        "Mobility Session", "Stretching and mobility work", "accessibility", "#52BE80", _R),
    WorkoutType.CUSTOM: WorkoutTypeInfo(
        "Custom", "User-defined workout structure", "build", "#7F8C8D", WorkoutCategory.CUSTOM),
}


# ---------------------------------------------------------------------------
# Coarse block type per workout type (unlisted types map to STRAIGHT_SETS)
# ---------------------------------------------------------------------------

_BLOCK_TYPES: dict[WorkoutType, BlockType] = {
    WorkoutType.SUPERSETS: BlockType.SUPERSET,
    WorkoutType.TRISETS: BlockType.TRISET,
    WorkoutType.GIANT_SETS: BlockType.GIANT_SET,
    WorkoutType.CIRCUIT: BlockType.CIRCUIT,
    WorkoutType.CIRCUIT_REPS: BlockType.CIRCUIT,
    WorkoutType.CIRCUIT_TIME: BlockType.CIRCUIT,
    WorkoutType.EMOM: BlockType.EMOM,
    WorkoutType.EMOM_2: BlockType.EMOM,
    WorkoutType.EMOM_3: BlockType.EMOM,
    WorkoutType.TABATA: BlockType.TABATA,
    WorkoutType.AMRAP: BlockType.AMRAP,
    WorkoutType.FOR_TIME: BlockType.FOR_TIME,
    WorkoutType.COMPLEX_TRAINING: BlockType.COMPLEX,
    WorkoutType.CONTRAST_TRAINING: BlockType.COMPLEX,
    WorkoutType.LADDER_SETS: BlockType.LADDER,
    WorkoutType.LADDER_CLIMB: BlockType.LADDER,
    WorkoutType.PYRAMID: BlockType.PYRAMID,
    WorkoutType.REVERSE_PYRAMID: BlockType.PYRAMID,
    WorkoutType.WAVE_LOADING: BlockType.WAVE,
    WorkoutType.CLUSTER_SETS: BlockType.CLUSTER,
    WorkoutType.REST_PAUSE: BlockType.REST_PAUSE,
    WorkoutType.DROP_SETS: BlockType.DROP_SET,
    WorkoutType.MECHANICAL_DROP_SET: BlockType.MECHANICAL_DROP_SET,
    WorkoutType.DEATH_BY: BlockType.DEATH_BY,
    WorkoutType.CUSTOM: BlockType.CUSTOM,
}


# ---------------------------------------------------------------------------
# Classification sets
# ---------------------------------------------------------------------------

TIME_BASED_TYPES = frozenset({
    WorkoutType.TABATA, WorkoutType.EMOM, WorkoutType.EMOM_2, WorkoutType.EMOM_3,
    WorkoutType.FOR_TIME, WorkoutType.AMRAP, WorkoutType.CIRCUIT_TIME,
    WorkoutType.HIIT, WorkoutType.INTERVAL_TRAINING, WorkoutType.DEATH_BY,
})

SUPERSET_TYPES = frozenset({
    WorkoutType.SUPERSETS, WorkoutType.TRISETS, WorkoutType.GIANT_SETS,
    WorkoutType.CIRCUIT, WorkoutType.CIRCUIT_REPS, WorkoutType.CIRCUIT_TIME,
})

DROP_SET_TYPES = frozenset({
    WorkoutType.DROP_SETS, WorkoutType.MECHANICAL_DROP_SET,
    WorkoutType.REST_PAUSE, WorkoutType.CLUSTER_SETS,
})

CIRCUIT_TYPES = frozenset({
    WorkoutType.CIRCUIT, WorkoutType.CIRCUIT_REPS, WorkoutType.CIRCUIT_TIME,
})

EMOM_TYPES = frozenset({WorkoutType.EMOM, WorkoutType.EMOM_2, WorkoutType.EMOM_3})

# Types whose session screen shows a rounds-completed tracker
ROUND_BASED_TYPES = CIRCUIT_TYPES | {WorkoutType.AMRAP}

# Types that capture a free-text WOD result (completion time / rounds+reps)
WOD_RESULT_TYPES = frozenset({WorkoutType.FOR_TIME, WorkoutType.AMRAP})


# ---------------------------------------------------------------------------
# Public lookups
# ---------------------------------------------------------------------------


def constraints_for(workout_type: WorkoutType | str | None) -> WorkoutTypeConstraints:
    """Return the structural constraints for *workout_type*.

    Unknown names and None resolve to the STRAIGHT_SETS constraints.
    """
    return WORKOUT_TYPE_CONSTRAINTS[WorkoutType.parse(workout_type)]


def display_info(workout_type: WorkoutType | str | None) -> WorkoutTypeInfo:
    """Return presentation metadata for *workout_type*."""
    return WORKOUT_TYPE_INFO[WorkoutType.parse(workout_type)]


def block_type_for(workout_type: WorkoutType | str | None) -> BlockType:
    return _BLOCK_TYPES.get(WorkoutType.parse(workout_type), BlockType.STRAIGHT_SETS)


def workout_types_in(category: WorkoutCategory) -> tuple[WorkoutType, ...]:
    """All workout types in a selection-menu category, in declaration order."""
    return tuple(wt for wt, info in WORKOUT_TYPE_INFO.items() if info.category == category)


def exercise_limit_message(workout_type: WorkoutType | str | None) -> str:
    """User-facing text for a rejected add, e.g. 'Supersets requires exactly 2 exercises.'"""
    constraints = constraints_for(workout_type)
    name = display_info(workout_type).display_name
    limit = constraints.max_exercises
    if limit is None:
        return f"{name} has no exercise limit."
    plural = "s" if limit > 1 else ""
    if constraints.is_fixed_count:
        return f"{name} requires exactly {limit} {constraints.exercise_label}{plural}."
    return f"{name} allows at most {limit} {constraints.exercise_label}{plural}."


def is_time_based(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in TIME_BASED_TYPES


def is_superset(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in SUPERSET_TYPES


def is_drop_set(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in DROP_SET_TYPES


def is_round_based(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in ROUND_BASED_TYPES


def is_circuit(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in CIRCUIT_TYPES


def is_emom(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in EMOM_TYPES


def is_tabata(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) == WorkoutType.TABATA


def captures_wod_result(workout_type: WorkoutType | str | None) -> bool:
    return WorkoutType.parse(workout_type) in WOD_RESULT_TYPES


def tracked_metrics(workout_type: WorkoutType | str | None) -> frozenset[MetricKind]:
    """Counters the execution engine offers while a block of this type is current.

    Circuits use the circuit-specific round counter; AMRAP uses the generic
    one. EMOM variants track completed and failed minutes; Tabata its rounds.
    """
    wt = WorkoutType.parse(workout_type)
    kinds: set[MetricKind] = set()
    if wt in CIRCUIT_TYPES:
        kinds.add(MetricKind.CIRCUIT_ROUNDS)
    elif wt in ROUND_BASED_TYPES:
        kinds.add(MetricKind.ROUNDS)
    if wt in EMOM_TYPES:
        kinds.add(MetricKind.EMOM_MINUTES)
    if wt == WorkoutType.TABATA:
        kinds.add(MetricKind.TABATA_ROUNDS)
    if wt in WOD_RESULT_TYPES:
        kinds.add(MetricKind.WOD_RESULT)
    return frozenset(kinds)
