"""Constants and enums for the PsychoScore engine.

This module holds every lookup table the scoring pipeline reads: the sixteen
primary personality factors, the composite (global) factor formulas, the
typology decision table, cognitive ability aliases, level and band thresholds,
and the fixed domain templates. Tables are module-level and never mutated.
"""

import re
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple


# ============================================================================
# CORE ENUMS
# ============================================================================

class TestKind(str, Enum):
    """Kinds of assessment the engine can score."""

    __test__ = False

    PERSONALITY = "personality"
    COGNITIVE = "cognitive"
    COMMUNICATION = "communication"
    TECHNICAL = "technical"
    CULTURE = "culture"

    @classmethod
    def resolve(cls, value: Optional[str]) -> Optional["TestKind"]:
        """Resolve a free-form test type string to a kind.

        Args:
            value: Test type as stored on the test definition

        Returns:
            Optional[TestKind]: Matching kind, or None when unsupported
        """
        if not value:
            return None

        key = normalize_label(value)
        for kind in cls:
            if kind.value == key:
                return kind
        return TEST_KIND_ALIASES.get(key)


class QuestionType(str, Enum):
    """Question shapes understood by the attempt scorer."""

    SCALE = "scale"
    LIKERT = "likert"
    MULTIPLE_CHOICE = "multiple_choice"
    YES_NO = "yes_no"

    @classmethod
    def resolve(cls, value: Optional[str]) -> Optional["QuestionType"]:
        if not value:
            return None

        key = normalize_label(value)
        for question_type in cls:
            if question_type.value == key:
                return question_type
        return None


class FactorLevel(str, Enum):
    """Qualitative band for a standardized primary factor score."""

    VERY_LOW = "Very Low"
    LOW = "Low"
    AVERAGE = "Average"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @classmethod
    def from_score(cls, score: int) -> "FactorLevel":
        for upper_bound, level in FACTOR_LEVEL_BANDS:
            if score <= upper_bound:
                return level
        return cls.VERY_HIGH

    @property
    def is_high(self) -> bool:
        return self in (FactorLevel.HIGH, FactorLevel.VERY_HIGH)

    @property
    def is_low(self) -> bool:
        return self in (FactorLevel.LOW, FactorLevel.VERY_LOW)


class GlobalLevel(str, Enum):
    """Two-way band for a composite factor."""

    HIGH = "High"
    LOW = "Low"


class ReliabilityVerdict(str, Enum):
    """Outcome of the response-quality audit."""

    RELIABLE = "Reliable"
    INVALID = "Invalid"
    TOO_FAST = "Questionable - Too Fast"
    TOO_SLOW = "Questionable - Too Slow"
    PATTERN_RESPONDING = "Questionable - Pattern Responding"

    @property
    def is_reliable(self) -> bool:
        return self is ReliabilityVerdict.RELIABLE


class LeadershipPotential(str, Enum):
    """Leadership read-out derived from four primary factors."""

    HIGH = "High Leadership Potential"
    MODERATE = "Moderate Leadership Potential"
    INDIVIDUAL = "Individual Contributor Strength"

    @property
    def is_high(self) -> bool:
        return self is LeadershipPotential.HIGH


class PersonalityType(str, Enum):
    """Archetype labels produced by the typology classifier."""

    NATURAL_LEADER = "Natural Leader"
    TEAM_PLAYER = "Team Player"
    INNOVATOR = "Innovator"
    RELIABLE_EXECUTOR = "Reliable Executor"
    INDEPENDENT_CONTRIBUTOR = "Independent Contributor"
    BALANCED_PROFESSIONAL = "Balanced Professional"


# ============================================================================
# PRIMARY PERSONALITY FACTORS
# ============================================================================

class PrimaryFactor(str, Enum):
    """The sixteen primary personality factors, in roster order."""

    WARMTH = "Warmth (A)"
    REASONING = "Reasoning (B)"
    EMOTIONAL_STABILITY = "Emotional Stability (C)"
    DOMINANCE = "Dominance (E)"
    LIVELINESS = "Liveliness (F)"
    RULE_CONSCIOUSNESS = "Rule-Consciousness (G)"
    SOCIAL_BOLDNESS = "Social Boldness (H)"
    SENSITIVITY = "Sensitivity (I)"
    VIGILANCE = "Vigilance (L)"
    ABSTRACTEDNESS = "Abstractedness (M)"
    PRIVATENESS = "Privateness (N)"
    APPREHENSION = "Apprehension (O)"
    OPENNESS_TO_CHANGE = "Openness to Change (Q1)"
    SELF_RELIANCE = "Self-Reliance (Q2)"
    PERFECTIONISM = "Perfectionism (Q3)"
    TENSION = "Tension (Q4)"

    @property
    def description(self) -> str:
        """Polarity description, low pole first."""
        return PRIMARY_FACTOR_DESCRIPTIONS[self]

    @property
    def short_name(self) -> str:
        """Factor name without the code suffix, e.g. ``Warmth``."""
        return self.value.rsplit(" (", 1)[0]

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Normalized category labels that resolve to this factor."""
        return (normalize_label(self.short_name), normalize_label(self.value))


PRIMARY_FACTOR_DESCRIPTIONS: Dict[PrimaryFactor, str] = {
    PrimaryFactor.WARMTH: "Reserved vs. Warm",
    PrimaryFactor.REASONING: "Concrete vs. Abstract",
    PrimaryFactor.EMOTIONAL_STABILITY: "Reactive vs. Emotionally Stable",
    PrimaryFactor.DOMINANCE: "Deferential vs. Dominant",
    PrimaryFactor.LIVELINESS: "Serious vs. Lively",
    PrimaryFactor.RULE_CONSCIOUSNESS: "Expedient vs. Rule-Conscious",
    PrimaryFactor.SOCIAL_BOLDNESS: "Shy vs. Socially Bold",
    PrimaryFactor.SENSITIVITY: "Utilitarian vs. Sensitive",
    PrimaryFactor.VIGILANCE: "Trusting vs. Vigilant",
    PrimaryFactor.ABSTRACTEDNESS: "Practical vs. Abstract",
    PrimaryFactor.PRIVATENESS: "Forthright vs. Private",
    PrimaryFactor.APPREHENSION: "Self-Assured vs. Apprehensive",
    PrimaryFactor.OPENNESS_TO_CHANGE: "Traditional vs. Open to Change",
    PrimaryFactor.SELF_RELIANCE: "Group-Oriented vs. Self-Reliant",
    PrimaryFactor.PERFECTIONISM: "Tolerates Disorder vs. Perfectionist",
    PrimaryFactor.TENSION: "Relaxed vs. Tense",
}

# Upper bound (inclusive) of each band, checked in order
FACTOR_LEVEL_BANDS: List[Tuple[int, FactorLevel]] = [
    (2, FactorLevel.VERY_LOW),
    (4, FactorLevel.LOW),
    (6, FactorLevel.AVERAGE),
    (8, FactorLevel.HIGH),
]

# Keyed by (factor, pole); pole is "low" when score <= 4
FACTOR_IMPLICATIONS: Dict[Tuple[PrimaryFactor, str], List[str]] = {
    (PrimaryFactor.WARMTH, "low"): [
        "May prefer working independently",
        "Task-focused approach",
        "Direct communication style",
    ],
    (PrimaryFactor.WARMTH, "high"): [
        "Strong interpersonal skills",
        "Team-oriented",
        "Empathetic and caring",
    ],
    (PrimaryFactor.REASONING, "low"): [
        "Practical, concrete thinking",
        "Hands-on learning style",
        "Detail-oriented",
    ],
    (PrimaryFactor.REASONING, "high"): [
        "Abstract thinking ability",
        "Strategic planning skills",
        "Complex problem-solving",
    ],
    (PrimaryFactor.EMOTIONAL_STABILITY, "low"): [
        "May be affected by stress",
        "Emotionally expressive",
        "Sensitive to feedback",
    ],
    (PrimaryFactor.EMOTIONAL_STABILITY, "high"): [
        "Calm under pressure",
        "Resilient",
        "Stable emotional responses",
    ],
    (PrimaryFactor.DOMINANCE, "low"): [
        "Collaborative approach",
        "Good follower",
        "Respectful of authority",
    ],
    (PrimaryFactor.DOMINANCE, "high"): [
        "Natural leadership qualities",
        "Assertive communication",
        "Decision-making ability",
    ],
}


# ============================================================================
# GLOBAL (COMPOSITE) FACTORS
# ============================================================================

class GlobalFactorName(str, Enum):
    """Second-order composites derived from the primary factors."""

    EXTRAVERSION = "Extraversion"
    ANXIETY = "Anxiety"
    TOUGH_MINDEDNESS = "Tough-Mindedness"
    INDEPENDENCE = "Independence"
    SELF_CONTROL = "Self-Control"

    @property
    def description(self) -> str:
        return GLOBAL_FACTOR_DESCRIPTIONS[self]


class GlobalFactorFormula(NamedTuple):
    """Signed sum of primary factor scores divided by a fixed divisor."""

    terms: Tuple[Tuple[PrimaryFactor, int], ...]
    divisor: int


GLOBAL_FACTOR_FORMULAS: Dict[GlobalFactorName, GlobalFactorFormula] = {
    GlobalFactorName.EXTRAVERSION: GlobalFactorFormula(
        terms=(
            (PrimaryFactor.WARMTH, 1),
            (PrimaryFactor.LIVELINESS, 1),
            (PrimaryFactor.SOCIAL_BOLDNESS, 1),
            (PrimaryFactor.PRIVATENESS, -1),
        ),
        divisor=4,
    ),
    GlobalFactorName.ANXIETY: GlobalFactorFormula(
        terms=(
            (PrimaryFactor.APPREHENSION, 1),
            (PrimaryFactor.TENSION, 1),
            (PrimaryFactor.EMOTIONAL_STABILITY, -1),
        ),
        divisor=3,
    ),
    GlobalFactorName.TOUGH_MINDEDNESS: GlobalFactorFormula(
        terms=(
            (PrimaryFactor.REASONING, 1),
            (PrimaryFactor.SENSITIVITY, -1),
            (PrimaryFactor.VIGILANCE, 1),
        ),
        divisor=3,
    ),
    GlobalFactorName.INDEPENDENCE: GlobalFactorFormula(
        terms=(
            (PrimaryFactor.DOMINANCE, 1),
            (PrimaryFactor.OPENNESS_TO_CHANGE, 1),
            (PrimaryFactor.SELF_RELIANCE, 1),
        ),
        divisor=3,
    ),
    GlobalFactorName.SELF_CONTROL: GlobalFactorFormula(
        terms=(
            (PrimaryFactor.RULE_CONSCIOUSNESS, 1),
            (PrimaryFactor.PERFECTIONISM, 1),
            (PrimaryFactor.ABSTRACTEDNESS, -1),
        ),
        divisor=3,
    ),
}

GLOBAL_FACTOR_DESCRIPTIONS: Dict[GlobalFactorName, str] = {
    GlobalFactorName.EXTRAVERSION: "Tendency to be outgoing, talkative, and sociable vs. reserved and quiet",
    GlobalFactorName.ANXIETY: "Tendency to experience worry, stress, and emotional instability",
    GlobalFactorName.TOUGH_MINDEDNESS: "Practical, objective thinking vs. emotional, subjective approach",
    GlobalFactorName.INDEPENDENCE: "Self-reliant, autonomous behavior vs. group-dependent approach",
    GlobalFactorName.SELF_CONTROL: "Disciplined, controlled behavior vs. spontaneous, impulsive actions",
}


# ============================================================================
# TYPOLOGY AND WORK STYLE
# ============================================================================

# First rule whose factors all score above the threshold wins
PERSONALITY_TYPE_RULES: List[Tuple[Tuple[PrimaryFactor, ...], PersonalityType]] = [
    ((PrimaryFactor.DOMINANCE, PrimaryFactor.WARMTH), PersonalityType.NATURAL_LEADER),
    ((PrimaryFactor.WARMTH, PrimaryFactor.EMOTIONAL_STABILITY), PersonalityType.TEAM_PLAYER),
    ((PrimaryFactor.OPENNESS_TO_CHANGE, PrimaryFactor.REASONING), PersonalityType.INNOVATOR),
    ((PrimaryFactor.EMOTIONAL_STABILITY, PrimaryFactor.RULE_CONSCIOUSNESS), PersonalityType.RELIABLE_EXECUTOR),
    ((PrimaryFactor.SELF_RELIANCE,), PersonalityType.INDEPENDENT_CONTRIBUTOR),
]

WORK_STYLE_TAGS: List[Tuple[PrimaryFactor, str]] = [
    (PrimaryFactor.WARMTH, "Collaborative"),
    (PrimaryFactor.DOMINANCE, "Leadership-oriented"),
    (PrimaryFactor.SELF_RELIANCE, "Independent"),
    (PrimaryFactor.PERFECTIONISM, "Detail-oriented"),
    (PrimaryFactor.OPENNESS_TO_CHANGE, "Adaptable"),
    (PrimaryFactor.RULE_CONSCIOUSNESS, "Structured"),
]

DEFAULT_WORK_STYLE = "Balanced approach"

LEADERSHIP_FACTORS: Tuple[PrimaryFactor, ...] = (
    PrimaryFactor.DOMINANCE,
    PrimaryFactor.EMOTIONAL_STABILITY,
    PrimaryFactor.WARMTH,
    PrimaryFactor.REASONING,
)


# ============================================================================
# COGNITIVE ABILITIES
# ============================================================================

class CognitiveAbility(str, Enum):
    """Sub-abilities reported by the cognitive scorer."""

    VERBAL = "verbal"
    NUMERICAL = "numerical"
    LOGICAL = "logical"
    SPATIAL = "spatial"
    SPEED = "speed"
    MEMORY = "memory"

    @property
    def aliases(self) -> Tuple[str, ...]:
        return COGNITIVE_ABILITY_ALIASES[self]

    @property
    def field_name(self) -> str:
        """Name of the matching field on the cognitive report section."""
        return COGNITIVE_ABILITY_FIELDS[self]


# Labels per ability in lookup order; the first label with answers is scored
COGNITIVE_ABILITY_ALIASES: Dict[CognitiveAbility, Tuple[str, ...]] = {
    CognitiveAbility.VERBAL: ("verbal", "language", "verbal_reasoning"),
    CognitiveAbility.NUMERICAL: ("numerical", "math", "numerical_reasoning"),
    CognitiveAbility.LOGICAL: ("logical", "reasoning", "logical_reasoning"),
    CognitiveAbility.SPATIAL: ("spatial", "visual", "spatial_reasoning"),
    CognitiveAbility.SPEED: ("speed", "processing", "processing_speed"),
    CognitiveAbility.MEMORY: ("memory", "working_memory"),
}

COGNITIVE_ABILITY_FIELDS: Dict[CognitiveAbility, str] = {
    CognitiveAbility.VERBAL: "verbal_reasoning",
    CognitiveAbility.NUMERICAL: "numerical_reasoning",
    CognitiveAbility.LOGICAL: "logical_reasoning",
    CognitiveAbility.SPATIAL: "spatial_reasoning",
    CognitiveAbility.SPEED: "processing_speed",
    CognitiveAbility.MEMORY: "working_memory",
}

# (minimum IQ, roles), checked in order; only the first match applies
COGNITIVE_ROLE_TIERS: List[Tuple[int, List[str]]] = [
    (120, ["Strategic Planning", "Research & Development", "Senior Management"]),
    (110, ["Project Management", "Technical Specialist", "Team Leadership"]),
    (100, ["Operations", "Customer Service", "Administrative"]),
]

# Added on top of the tier roles when the ability is a strength
COGNITIVE_ABILITY_ROLES: List[Tuple[CognitiveAbility, List[str]]] = [
    (CognitiveAbility.NUMERICAL, ["Financial Analysis", "Data Analysis"]),
    (CognitiveAbility.VERBAL, ["Communications", "Training", "Sales"]),
    (CognitiveAbility.LOGICAL, ["IT", "Engineering", "Quality Assurance"]),
]

IQ_BANDS: List[Tuple[int, str]] = [
    (130, "Very Superior"),
    (120, "Superior"),
    (110, "High Average"),
    (90, "Average"),
    (80, "Low Average"),
]
IQ_FLOOR_BAND = "Below Average"


# ============================================================================
# DOMAIN TEMPLATES AND CATEGORY MAPPINGS
# ============================================================================

class CommunicationSkill(str, Enum):
    """Communication sub-scores; values double as report field names."""

    VERBAL = "verbal_communication"
    WRITTEN = "written_communication"
    LISTENING = "listening_skills"
    PERSUASION = "persuasion_ability"
    CONFLICT_RESOLUTION = "conflict_resolution"
    TEAM = "team_communication"


COMMUNICATION_TEMPLATE: Dict[CommunicationSkill, int] = {
    CommunicationSkill.VERBAL: 75,
    CommunicationSkill.WRITTEN: 80,
    CommunicationSkill.LISTENING: 70,
    CommunicationSkill.PERSUASION: 65,
    CommunicationSkill.CONFLICT_RESOLUTION: 72,
    CommunicationSkill.TEAM: 78,
}
COMMUNICATION_DEFAULT_STYLE = "Direct and Clear"
COMMUNICATION_DEFAULT_IMPROVEMENTS = ["Active listening", "Conflict resolution"]

COMMUNICATION_CATEGORY_ALIASES: Dict[CommunicationSkill, Tuple[str, ...]] = {
    CommunicationSkill.VERBAL: ("verbal", "verbal_communication", "presentation_skills", "presentation"),
    CommunicationSkill.WRITTEN: ("written", "written_communication"),
    CommunicationSkill.LISTENING: ("listening", "active_listening"),
    CommunicationSkill.PERSUASION: ("persuasion", "client_communication", "negotiation"),
    CommunicationSkill.CONFLICT_RESOLUTION: ("conflict_resolution", "conflict"),
    CommunicationSkill.TEAM: ("team", "team_communication", "teamwork"),
}

COMMUNICATION_STYLES: Dict[CommunicationSkill, str] = {
    CommunicationSkill.VERBAL: "Direct and Clear",
    CommunicationSkill.WRITTEN: "Structured and Precise",
    CommunicationSkill.LISTENING: "Attentive and Receptive",
    CommunicationSkill.PERSUASION: "Persuasive and Influential",
    CommunicationSkill.CONFLICT_RESOLUTION: "Diplomatic and Mediating",
    CommunicationSkill.TEAM: "Collaborative and Supportive",
}

COMMUNICATION_IMPROVEMENT_LABELS: Dict[CommunicationSkill, str] = {
    CommunicationSkill.VERBAL: "Verbal presentation",
    CommunicationSkill.WRITTEN: "Written communication",
    CommunicationSkill.LISTENING: "Active listening",
    CommunicationSkill.PERSUASION: "Persuasion and influence",
    CommunicationSkill.CONFLICT_RESOLUTION: "Conflict resolution",
    CommunicationSkill.TEAM: "Team communication",
}


class TechnicalSkill(str, Enum):
    """Technical sub-scores; values double as report field names."""

    PROBLEM_SOLVING = "problem_solving"
    ANALYTICAL_THINKING = "analytical_thinking"
    TECHNICAL_KNOWLEDGE = "technical_knowledge"
    LEARNING_AGILITY = "learning_agility"
    ATTENTION_TO_DETAIL = "attention_to_detail"


TECHNICAL_TEMPLATE: Dict[TechnicalSkill, int] = {
    TechnicalSkill.PROBLEM_SOLVING: 82,
    TechnicalSkill.ANALYTICAL_THINKING: 78,
    TechnicalSkill.TECHNICAL_KNOWLEDGE: 75,
    TechnicalSkill.LEARNING_AGILITY: 80,
    TechnicalSkill.ATTENTION_TO_DETAIL: 85,
}
TECHNICAL_DEFAULT_LEVEL = "Advanced"
TECHNICAL_DEFAULT_ROLES = ["Software Developer", "Systems Analyst", "Technical Lead"]
TECHNICAL_DEFAULT_TRAINING = ["Advanced algorithms", "System architecture"]

TECHNICAL_CATEGORY_ALIASES: Dict[TechnicalSkill, Tuple[str, ...]] = {
    TechnicalSkill.PROBLEM_SOLVING: ("problem_solving",),
    TechnicalSkill.ANALYTICAL_THINKING: ("analytical_thinking", "data_analysis", "analysis"),
    TechnicalSkill.TECHNICAL_KNOWLEDGE: ("technical_knowledge", "software_development", "technical"),
    TechnicalSkill.LEARNING_AGILITY: ("learning_agility", "learning", "change_adaptation"),
    TechnicalSkill.ATTENTION_TO_DETAIL: ("attention_to_detail", "pattern_recognition", "detail"),
}

# (minimum mean sub-score, level, suitable roles), checked in order
TECHNICAL_LEVELS: List[Tuple[int, str, List[str]]] = [
    (80, "Advanced", ["Software Developer", "Systems Analyst", "Technical Lead"]),
    (65, "Intermediate", ["Junior Developer", "Technical Support Specialist", "QA Analyst"]),
    (0, "Foundational", ["Technical Trainee", "Support Associate"]),
]

TECHNICAL_TRAINING_LABELS: Dict[TechnicalSkill, str] = {
    TechnicalSkill.PROBLEM_SOLVING: "Structured problem solving",
    TechnicalSkill.ANALYTICAL_THINKING: "Analytical methods",
    TechnicalSkill.TECHNICAL_KNOWLEDGE: "Core technical fundamentals",
    TechnicalSkill.LEARNING_AGILITY: "Learning strategies",
    TechnicalSkill.ATTENTION_TO_DETAIL: "Quality and review practices",
}


class CoreValue(str, Enum):
    INTEGRITY = "integrity"
    INNOVATION = "innovation"
    TEAMWORK = "teamwork"
    EXCELLENCE = "excellence"


class WorkValue(str, Enum):
    AUTONOMY = "autonomy"
    RECOGNITION = "recognition"
    GROWTH = "growth"
    SECURITY = "security"


CULTURE_CORE_TEMPLATE: Dict[CoreValue, int] = {
    CoreValue.INTEGRITY: 85,
    CoreValue.INNOVATION: 78,
    CoreValue.TEAMWORK: 82,
    CoreValue.EXCELLENCE: 80,
}
CULTURE_WORK_TEMPLATE: Dict[WorkValue, int] = {
    WorkValue.AUTONOMY: 75,
    WorkValue.RECOGNITION: 70,
    WorkValue.GROWTH: 85,
    WorkValue.SECURITY: 60,
}
CULTURE_DEFAULT_ALIGNMENT = 79
CULTURE_DEFAULT_TEAM_FIT = 82
CULTURE_DEFAULT_FIT = "Strong Match"
CULTURE_DEFAULT_RECOMMENDATIONS = ["Mentorship program", "Cultural orientation"]

CULTURE_CATEGORY_ALIASES: Dict[str, Tuple[str, ...]] = {
    CoreValue.INTEGRITY.value: ("integrity", "ethics"),
    CoreValue.INNOVATION.value: ("innovation", "change_adaptation"),
    CoreValue.TEAMWORK.value: ("teamwork", "team", "collaboration"),
    CoreValue.EXCELLENCE.value: ("excellence", "quality"),
    WorkValue.AUTONOMY.value: ("autonomy", "work_style", "independence"),
    WorkValue.RECOGNITION.value: ("recognition", "feedback_preference"),
    WorkValue.GROWTH.value: ("growth", "motivation", "development"),
    WorkValue.SECURITY.value: ("security", "work_environment", "stability"),
}

# (minimum alignment, label), checked in order
CULTURE_FIT_BANDS: List[Tuple[int, str]] = [
    (75, "Strong Match"),
    (60, "Moderate Match"),
]
CULTURE_FIT_FLOOR = "Limited Match"
CULTURE_TEAM_FIT_RECOMMENDATION = "Team integration support"
CULTURE_ALIGNMENT_RECOMMENDATION = "Values alignment discussions"
CULTURE_BASE_RECOMMENDATION = "Mentorship program"


# ============================================================================
# SCORING CONSTANTS
# ============================================================================

class ScoringConstants:
    """Constants for factor, cognitive and attempt scoring."""

    # Primary factors
    STANDARD_SCORE_MULTIPLIER = 2
    PERCENTILE_STEP = 11.11
    MIN_PERCENTILE = 1
    MAX_PERCENTILE = 99
    LOW_POLE_MAX_SCORE = 4
    TYPOLOGY_THRESHOLD = 6
    GLOBAL_HIGH_THRESHOLD = 5
    HIGH_LEADERSHIP_SCORE = 7
    MODERATE_LEADERSHIP_SCORE = 5

    # Cognitive
    IQ_SCALE = 160
    IQ_FLOOR = 40
    DEFAULT_ABILITY_SCORE = 50
    ABILITY_STRENGTH_THRESHOLD = 75
    ABILITY_WEAKNESS_THRESHOLD = 50

    # Domain questionnaires answered on a 1-5 scale
    LIKERT_MIN = 1
    LIKERT_MAX = 5
    COMMUNICATION_IMPROVEMENT_THRESHOLD = 75
    TECHNICAL_TRAINING_THRESHOLD = 80
    TEAM_FIT_THRESHOLD = 70

    # Attempt scoring
    MAX_POINTS_PER_QUESTION = 5
    YES_POINTS = 5
    NO_POINTS = 1
    CORRECT_POINTS = 5
    INCORRECT_POINTS = 0
    MIN_PERCENTAGE = 0
    MAX_PERCENTAGE = 100


class ReliabilityConstants:
    """Thresholds for the response-quality audit (seconds and answer counts)."""

    MIN_COMPLETION_SECONDS = 300
    MAX_COMPLETION_SECONDS = 7200
    MAX_IDENTICAL_RUN = 10

    # Verification score
    BASE_VERIFICATION = 100
    UNRELIABLE_PENALTY = 30
    TOO_FAST_PENALTY = 20
    TOO_SLOW_PENALTY = 15
    LOW_PERFORMANCE_PENALTY = 25
    LOW_PERFORMANCE_SCORE = 20


class RecommendationConstants:
    """Thresholds and texts for hiring and risk recommendations."""

    # (minimum overall score, hiring lines), checked in order
    HIRING_TIERS: List[Tuple[int, List[str]]] = [
        (75, ["Highly recommended for hire", "Strong candidate with excellent potential"]),
        (60, ["Recommended for hire with development support", "Good candidate with growth potential"]),
    ]
    HIRING_FLOOR = [
        "Consider for entry-level positions with extensive training",
        "May require significant development investment",
    ]

    PERFORMANCE_BANDS: List[Tuple[int, str]] = [
        (90, "Exceptional"),
        (80, "Excellent"),
        (70, "Good"),
        (60, "Satisfactory"),
        (50, "Below Average"),
    ]
    PERFORMANCE_FLOOR = "Poor"

    LEADERSHIP_DEVELOPMENT = "Leadership development program"
    LEADERSHIP_PLACEMENT = "Management track positions"
    STANDARD_DEVELOPMENT = ["Regular performance reviews", "Continuous learning opportunities"]

    # Attempt-level recommendations: kind -> (minimum percentage, lines), then floor
    ATTEMPT_TIERS: Dict[TestKind, List[Tuple[int, List[str]]]] = {
        TestKind.PERSONALITY: [
            (80, [
                "Excellent personality fit for the role with strong interpersonal skills.",
                "Consider for leadership development opportunities.",
            ]),
            (60, [
                "Good personality match with potential for growth.",
                "Recommend mentoring and skill development programs.",
            ]),
            (0, [
                "Consider additional personality development training.",
                "May benefit from team-based collaboration exercises.",
            ]),
        ],
        TestKind.COGNITIVE: [
            (80, [
                "Strong cognitive abilities suitable for complex problem-solving roles.",
                "Consider for analytical and strategic positions.",
            ]),
            (60, [
                "Good cognitive performance with room for improvement.",
                "Recommend continued learning and development opportunities.",
            ]),
            (0, [
                "May benefit from additional training in analytical thinking.",
                "Consider roles that leverage existing strengths.",
            ]),
        ],
    }

    VERY_LOW_PERFORMANCE_SCORE = 40
    HIGH_ANXIETY_SCORE = 7
    VERY_LOW_PERFORMANCE_RISK = "Very low overall performance - significant training required"
    HIGH_ANXIETY_RISK = "High anxiety levels - may affect performance under stress"


# ============================================================================
# ERROR CODES
# ============================================================================

class ErrorCodes:
    """Standardized error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TEST_DEFINITION = "INVALID_TEST_DEFINITION"
    INVALID_RESPONSE_SET = "INVALID_RESPONSE_SET"
    UNSUPPORTED_TEST_KIND = "UNSUPPORTED_TEST_KIND"
    DUPLICATE_SCORER = "DUPLICATE_SCORER"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


TEST_KIND_ALIASES: Dict[str, TestKind] = {
    "personality_comprehensive": TestKind.PERSONALITY,
    "16pf": TestKind.PERSONALITY,
    "cognitive_ability": TestKind.COGNITIVE,
    "culture_fit": TestKind.CULTURE,
    "cultural_fit": TestKind.CULTURE,
    "technical_aptitude": TestKind.TECHNICAL,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_label(label: str) -> str:
    """Normalize a category or kind label to snake_case.

    ``"Warmth (A)"`` becomes ``"warmth_a"`` and ``"Rule-Consciousness"``
    becomes ``"rule_consciousness"``.

    Args:
        label: Free-form label

    Returns:
        str: Lowercase label with runs of other characters collapsed to ``_``
    """
    return _NON_ALNUM.sub("_", str(label).strip().lower()).strip("_")


def band_for(value: float, bands: List[Tuple[int, str]], floor: str) -> str:
    """Return the label of the first band whose minimum ``value`` reaches.

    Args:
        value: Score to classify
        bands: (minimum, label) pairs in descending order
        floor: Label used when no band matches

    Returns:
        str: Band label
    """
    for minimum, label in bands:
        if value >= minimum:
            return label
    return floor
