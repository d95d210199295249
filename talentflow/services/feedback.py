"""
Feedback Generation - TalentFlow
talentflow/services/feedback.py

Narrative feedback for a completed evaluation. The generator is pluggable:
an external text model can be wired in by subclassing FeedbackGenerator.
Generators raise FeedbackGenerationError on failure; the evaluation service
then stores the configured fallback message instead.

build_feedback_prompt() renders the rating sheet used as model input.
StaticFeedbackGenerator is the built-in, rule-based generator.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple, Union

from talentflow.models.criteria import Factor
from talentflow.models.enumerations import EvaluationMode
from talentflow.models.evaluation import EvaluationScore
from talentflow.models.person import Applicant, Employee
from talentflow.scoring.aggregator import aggregate

Person = Union[Employee, Applicant]

# Reading of a raw 1-10 rating, independent of the configured level thresholds
RATING_BANDS: List[Tuple[str, float, float]] = [
    ("Bajo", 1, 3),
    ("Medio", 4, 7),
    ("Alto", 8, 10),
]

STRENGTH_MIN = 8
IMPROVEMENT_MAX = 3


def rating_band(score: float) -> str:
    """Name of the first band whose upper bound reaches ``score``."""
    for name, _, high in RATING_BANDS:
        if score <= high:
            return name
    return RATING_BANDS[-1][0]


class FeedbackGenerator(ABC):
    """Produces feedback text for one evaluation."""

    @abstractmethod
    def generate(
        self,
        person: Person,
        criteria: Sequence[Factor],
        scores: Sequence[EvaluationScore],
        mode: EvaluationMode,
    ) -> str:
        """
        Raises:
            FeedbackGenerationError: the text could not be produced
        """


def position_of(person: Person) -> str:
    if isinstance(person, Employee):
        return person.role
    return person.position_applied


def build_feedback_prompt(
    person: Person,
    criteria: Sequence[Factor],
    scores: Sequence[EvaluationScore],
    mode: EvaluationMode,
) -> str:
    """Render the rating sheet of an evaluation as Markdown."""
    lookup: Dict[str, float] = {}
    for entry in scores:
        lookup.setdefault(entry.characteristic_id, entry.score)

    kind = "la persona empleada" if isinstance(person, Employee) else "la persona aspirante"
    lines = [
        f"Evalúa a {kind} llamada **{person.name}** para el puesto de **{position_of(person)}**.",
        f"Se realizó esta evaluación bajo un nivel de rigor: **{mode.value}**.",
        "La escala de evaluación es de 1 a 10. Las puntuaciones se interpretan en rangos: "
        + ", ".join(f"**{name} ({low:g}-{high:g})**" for name, low, high in RATING_BANDS)
        + ".",
        "",
    ]
    for factor in criteria:
        lines.append(f"**Factor: {factor.name}**")
        for char in factor.characteristics:
            score = lookup.get(char.id, "N/A")
            lines.append(
                f'- Característica: "{char.name}" (Peso: {char.weight:.1f}): **Puntuación: {score}**'
            )
        lines.append("")
    return "\n".join(lines)


class StaticFeedbackGenerator(FeedbackGenerator):
    """
    Rule-based feedback: strengths are characteristics rated 8 or more,
    improvement areas those rated 3 or less.
    """

    def generate(
        self,
        person: Person,
        criteria: Sequence[Factor],
        scores: Sequence[EvaluationScore],
        mode: EvaluationMode,
    ) -> str:
        lookup: Dict[str, float] = {}
        for entry in scores:
            lookup.setdefault(entry.characteristic_id, entry.score)

        strengths = []
        improvements = []
        overall = aggregate(scores, criteria).overall
        for factor in criteria:
            for char in factor.characteristics:
                score = lookup.get(char.id)
                if score is None:
                    continue
                if score >= STRENGTH_MIN:
                    strengths.append(f"- {char.name} ({factor.name}): {score:g}")
                elif score <= IMPROVEMENT_MAX:
                    improvements.append(f"- {char.name} ({factor.name}): {score:g}")

        sections = [
            "### Resumen General",
            f"Evaluación de **{person.name}** ({position_of(person)}) con rigor {mode.value}.",
            f"Puntuación global: **{overall:.2f}** ({rating_band(overall)}).",
            "",
            "### Fortalezas Clave",
            *(strengths or ["- Sin características destacadas."]),
            "",
            "### Áreas de Mejora",
            *(improvements or ["- Sin áreas críticas detectadas."]),
        ]
        return "\n".join(sections)
