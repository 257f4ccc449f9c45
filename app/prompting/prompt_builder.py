"""Deterministic prompt composition for consultation summaries.

The same notes and preferences always produce byte-identical messages.
"""

from typing import ClassVar

from app.preferences.models import Preferences, SessionType, SummaryLength, Tone
from app.prompting.models import Prompt, PromptMessage, Role


class PromptBuilder:
    """Builds the system/user message pair for one summary request."""

    TONE_INSTRUCTIONS: ClassVar[dict[Tone, str]] = {
        Tone.CLINICAL: (
            "Use precise, clinical language with medical terminology. "
            "Be objective and professional."
        ),
        Tone.EMPATHETIC: (
            "Use warm, understanding language while maintaining professionalism. "
            "Show empathy and compassion."
        ),
        Tone.NEUTRAL: (
            "Use clear, professional language that is neither overly clinical "
            "nor emotional."
        ),
    }

    LENGTH_INSTRUCTIONS: ClassVar[dict[SummaryLength, str]] = {
        SummaryLength.SHORT: (
            "Provide a concise summary in 2-3 paragraphs focusing on key points only."
        ),
        SummaryLength.MEDIUM: (
            "Provide a comprehensive summary in 4-6 paragraphs covering all "
            "important aspects."
        ),
        SummaryLength.DETAILED: (
            "Provide an extensive summary with thorough analysis and detailed "
            "observations."
        ),
    }

    FOCUS_INSTRUCTIONS: ClassVar[dict[SessionType, str]] = {
        SessionType.THERAPY: (
            "Focus on therapeutic goals, client insights, emotional progress, "
            "and therapeutic interventions."
        ),
        SessionType.PSYCHIATRY: (
            "Emphasize mental status, symptoms, medication effects, and clinical "
            "observations."
        ),
        SessionType.COUPLES: (
            "Address relationship dynamics, communication patterns, conflicts, "
            "and joint therapeutic goals."
        ),
        SessionType.SEXUAL_HEALTH: (
            "Focus on sexual health concerns, treatment progress, and relevant "
            "therapeutic interventions while maintaining sensitivity."
        ),
    }

    STATELESS_NOTICE: ClassVar[str] = (
        "IMPORTANT: This is a standalone request. Do not reference any previous "
        "conversations, summaries, or context. Base your response ONLY on the "
        "session notes provided in this current request."
    )

    GENERAL_GUIDELINES: ClassVar[tuple[str, ...]] = (
        "Maintain strict patient confidentiality",
        "Use professional healthcare terminology appropriately",
        "Structure the summary logically with clear sections",
        "Focus on therapeutically relevant information",
        "Avoid speculation; only summarize what was documented",
        "Use present tense for current status and past tense for historical information",
        "Do not reference or build upon any previous sessions, summaries, or conversations",
        "Treat each summary request as completely independent",
    )

    CORE_SECTIONS: ClassVar[tuple[str, ...]] = (
        "Session Overview (date, duration, session type)",
        "Presenting Concerns/Issues Discussed",
        "Key Observations and Clinical Notes",
        "Progress and Insights",
        "Therapeutic Interventions Used",
    )

    ACTION_SECTIONS: ClassVar[tuple[str, ...]] = (
        "Action Items and Recommendations",
        "Follow-up Plans",
    )

    QUALITY_CHECKLIST: ClassVar[tuple[str, ...]] = (
        "Based ONLY on the current session notes provided above",
        "Professionally written and well-organized",
        "Clinically accurate and relevant",
        "Appropriate for healthcare documentation",
        "Suitable for sharing with other healthcare professionals",
        "Independent of any previous sessions or conversations",
    )

    ANONYMIZED_CHECK: ClassVar[str] = "Free of any personal identifying information"

    def build_prompt(self, session_notes: str, preferences: Preferences) -> Prompt:
        """Return the ``(system, user)`` message pair for *session_notes*."""
        return (
            PromptMessage(role=Role.SYSTEM, content=self._build_system_prompt(preferences)),
            PromptMessage(
                role=Role.USER,
                content=self._build_user_prompt(session_notes, preferences),
            ),
        )

    def _build_system_prompt(self, preferences: Preferences) -> str:
        session_type = SessionType.coerce(preferences.session_type)
        tone = self.TONE_INSTRUCTIONS.get(
            Tone.coerce(preferences.tone), self.TONE_INSTRUCTIONS[Tone.default()]
        )
        length = self.LENGTH_INSTRUCTIONS.get(
            SummaryLength.coerce(preferences.summary_length),
            self.LENGTH_INSTRUCTIONS[SummaryLength.default()],
        )
        focus = self.FOCUS_INSTRUCTIONS.get(
            session_type, self.FOCUS_INSTRUCTIONS[SessionType.default()]
        )
        guidelines = "\n".join(f"- {line}" for line in self.GENERAL_GUIDELINES)

        return (
            "You are a professional healthcare documentation assistant specializing "
            f"in {session_type.value} session summaries.\n\n"
            f"{self.STATELESS_NOTICE}\n\n"
            f"TONE: {tone}\n\n"
            f"SUMMARY LENGTH: {length}\n\n"
            f"SESSION TYPE FOCUS: {focus}\n\n"
            f"GENERAL GUIDELINES:\n{guidelines}"
        )

    def _build_user_prompt(self, session_notes: str, preferences: Preferences) -> str:
        sections = list(self.CORE_SECTIONS)
        if preferences.include_action_items:
            sections.extend(self.ACTION_SECTIONS)

        checklist = list(self.QUALITY_CHECKLIST)
        if preferences.anonymize_data:
            checklist.append(self.ANONYMIZED_CHECK)

        lines = [
            "Please create a professional consultation summary based ONLY on the "
            "following session notes. Do not use any previous context or conversations:",
            "",
            session_notes,
            "",
            "SUMMARY STRUCTURE:",
            *(f"{number}. {title}" for number, title in enumerate(sections, start=1)),
            "",
            "Please ensure the summary is:",
            *(f"- {item}" for item in checklist),
        ]
        return "\n".join(lines) + "\n"
