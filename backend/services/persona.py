"""Assistant personas: system prompt and per-language prompt templates."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.chunk import ScoredChunk

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class Persona:
    """
    Prompt policy selected once at startup.

    Attributes:
        name: Registry key
        system_prompt: System message sent with every request
        templates: Language tag -> user prompt with {question} and {context}
        empty_context: Language tag -> text used when no chunk was retrieved
        default_language: Template used for languages without one
    """
    name: str
    system_prompt: str
    templates: Dict[str, str] = field(default_factory=dict)
    empty_context: Dict[str, str] = field(default_factory=dict)
    default_language: str = "en"

    def build_prompt(self, question: str, language: str, chunks: Optional[List[ScoredChunk]] = None) -> str:
        """
        Build the user prompt for a question.

        Args:
            question: User question
            language: Locale tag from LanguageDetector
            chunks: Retrieved chunks to use as context

        Returns:
            Complete prompt string
        """
        if language not in self.templates:
            logger.warning(f"No template for language {language!r}, using {self.default_language!r}")
            language = self.default_language

        context = format_context(chunks or [])
        if not context:
            context = self.empty_context.get(language, "")

        return self.templates[language].format(question=question, context=context)


def format_context(chunks: List[ScoredChunk]) -> str:
    """Render chunks as "Source: ..." blocks separated by horizontal rules."""
    return CONTEXT_SEPARATOR.join(f"Source: {chunk.source}\n{chunk.text}" for chunk in chunks)


MULTILINGUAL = Persona(
    name="multilingual",
    system_prompt="You are a multilingual assistant. ALWAYS answer in the user's language.",
    templates={
        "tr": """KULLANICI TÜRKÇE KONUŞUYOR.
Sen de TÜRKÇE cevap vereceksin.
Kısa, net, güvenli, bilimsel temelli cevaplar üret.
Soru: {question}

Bağlam:
{context}""",
        "en": """The USER IS SPEAKING ENGLISH.
You MUST answer in ENGLISH.
Keep answers short, clear and safe.
Question: {question}

Context:
{context}""",
    },
    empty_context={
        "tr": "Bağlam bulunamadı, genel ve güvenli bilgi ver.",
        "en": "No context found. Provide general, safe information.",
    },
)

WELLNESS = Persona(
    name="wellness",
    system_prompt=(
        "You are a friendly sleep and wellness coach. ALWAYS answer in the user's language. "
        "You do not diagnose; suggest seeing a doctor for medical concerns."
    ),
    templates={
        "tr": """KULLANICI TÜRKÇE KONUŞUYOR.
Sen de TÜRKÇE cevap vereceksin.
Uyku ve sağlıklı yaşam konusunda kısa, pratik ve bilimsel temelli öneriler ver.
Soru: {question}

Bağlam:
{context}""",
        "en": """The USER IS SPEAKING ENGLISH.
You MUST answer in ENGLISH.
Give short, practical, evidence-based sleep and wellness advice.
Question: {question}

Context:
{context}""",
    },
    empty_context={
        "tr": "Bağlam bulunamadı, genel ve güvenli bilgi ver.",
        "en": "No context found. Provide general, safe information.",
    },
)

PERSONAS: Dict[str, Persona] = {persona.name: persona for persona in (MULTILINGUAL, WELLNESS)}


def get_persona(name: str) -> Persona:
    """
    Look up a persona by name.

    Raises:
        ValueError: If no persona is registered under the name
    """
    try:
        return PERSONAS[name]
    except KeyError:
        raise ValueError(f"Unknown persona {name!r}; choose one of {sorted(PERSONAS)}") from None
