"""
Document pipeline built from ordered async steps.

Uploaded -> Extracted -> Identified -> (Translated | Skipped) -> Summarized -> Result

Each step reads and extends a per-run PipelineContext; nothing is shared
between runs, so concurrent runs for different documents are independent.
Only ExtractionError (and input validation errors) escape `process`.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from lingolens.config import PipelineConfig
from lingolens.core.extraction import FormatExtractor, default_extractors, extract
from lingolens.core.language import identify
from lingolens.core.models import (
    DEFAULT_LANGUAGE_CODE,
    ExtractedDocument,
    FileKind,
    LanguageCode,
    PipelineResult,
    PipelineState,
    UploadedFile,
    Words,
    words_from_text,
)
from lingolens.core.summarizer import ExtractiveSummarizer
from lingolens.core.translation import (
    FixedDelayPolicy,
    HttpTranslationGateway,
    TranslationGateway,
    TranslationOrchestrator,
    should_translate,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[PipelineState], None]


@dataclass
class PipelineContext:
    """Mutable state of a single pipeline run."""
    file: UploadedFile
    primary_language: LanguageCode
    document: Optional[ExtractedDocument] = None
    detected_language: LanguageCode = LanguageCode.UNDETERMINED
    text: str = ""
    words: Optional[Words] = None
    summary: str = ""


class PipelineStep(ABC):
    """Abstract base class for pipeline steps.

    Each step advances the context and returns the state it reached.
    """

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineState:
        pass


class ExtractionStep(PipelineStep):
    """Extract text and words; fails fast on empty documents."""

    def __init__(self, extractors: Optional[Dict[FileKind, FormatExtractor]] = None):
        self.extractors = extractors

    async def run(self, context: PipelineContext) -> PipelineState:
        document = await extract(context.file, self.extractors)
        context.document = document
        context.text = document.text
        context.words = document.words
        logger.info(f"Extracted {len(document.text)} characters from {context.file.filename}")
        return PipelineState.EXTRACTED


class IdentificationStep(PipelineStep):
    """Identify the language of the extracted text."""

    async def run(self, context: PipelineContext) -> PipelineState:
        context.detected_language = identify(context.text)
        logger.info(f"Detected language: {context.detected_language.value}")
        return PipelineState.IDENTIFIED


class TranslationStep(PipelineStep):
    """Translate toward the primary language when needed.

    Translated text gets freshly derived words; OCR confidence and
    bounding boxes no longer apply to it.
    """

    def __init__(self, orchestrator: TranslationOrchestrator):
        self.orchestrator = orchestrator

    async def run(self, context: PipelineContext) -> PipelineState:
        if not should_translate(context.detected_language, context.primary_language):
            return PipelineState.SKIPPED

        logger.info(
            f"Translating from {context.detected_language.value} to {context.primary_language.value}"
        )
        context.text = await self.orchestrator.translate(
            context.text, context.detected_language, context.primary_language
        )
        context.words = words_from_text(context.text)
        return PipelineState.TRANSLATED


class SummarizationStep(PipelineStep):
    """Summarize the settled text in the primary language."""

    def __init__(self, summarizer: ExtractiveSummarizer):
        self.summarizer = summarizer

    async def run(self, context: PipelineContext) -> PipelineState:
        # Words must never be empty while text is not
        if not context.words:
            context.words = words_from_text(context.text)
        context.summary = await self.summarizer.summarize(context.text, context.primary_language)
        return PipelineState.SUMMARIZED


class DocumentPipeline:
    """Sequences extraction, identification, translation and summarization."""

    def __init__(
        self,
        gateway: TranslationGateway,
        config: Optional[PipelineConfig] = None,
        extractors: Optional[Dict[FileKind, FormatExtractor]] = None,
        orchestrator: Optional[TranslationOrchestrator] = None,
        default_language: LanguageCode = DEFAULT_LANGUAGE_CODE
    ):
        """
        Args:
            gateway: Translation gateway used for text and summaries
            config: Pipeline settings (chunk size, delay, confidence, OCR language)
            extractors: Optional override of the per-kind extractors
            orchestrator: Optional pre-built orchestrator (overrides gateway/config pacing)
            default_language: Language that needs no summary translation
        """
        self.config = config or PipelineConfig()
        self.gateway = gateway
        self.default_language = default_language
        self.orchestrator = orchestrator or TranslationOrchestrator(
            gateway,
            chunk_size=self.config.chunk_size,
            rate_limit=FixedDelayPolicy(self.config.translation_delay)
        )
        self.steps: List[PipelineStep] = [
            ExtractionStep(extractors if extractors is not None else default_extractors(self.config.tesseract_lang)),
            IdentificationStep(),
            TranslationStep(self.orchestrator),
            SummarizationStep(ExtractiveSummarizer(self.orchestrator, default_language)),
        ]

    async def process(
        self,
        file: UploadedFile,
        selected_languages: Sequence,
        progress_callback: Optional[ProgressCallback] = None
    ) -> PipelineResult:
        """
        Run the whole pipeline for one document.

        Args:
            file: Uploaded document
            selected_languages: Non-empty ordered language codes; the first
                one is the translation and summary target
            progress_callback: Optional callback receiving each state reached

        Returns:
            PipelineResult

        Raises:
            ValueError: If no language is selected
            UnsupportedLanguageError: If a selected code is not supported
            ExtractionError: If no text could be extracted
        """
        if not selected_languages:
            raise ValueError("At least one target language must be selected")
        languages = [LanguageCode.parse(code) for code in selected_languages]
        primary = languages[0]

        def report(state: PipelineState):
            logger.debug(f"{file.filename}: {state.value}")
            if progress_callback:
                progress_callback(state)

        context = PipelineContext(file=file, primary_language=primary)
        report(PipelineState.UPLOADED)

        for step in self.steps:
            report(await step.run(context))

        result = PipelineResult(
            text=context.text,
            words=context.words,
            original_text=context.document.text,
            summary=context.summary,
            confidence=self.config.confidence,
            detected_languages=(context.detected_language,),
            translated_to=(primary,) if primary != self.default_language else (),
        )
        report(PipelineState.RESULT)
        return result


async def process(
    file: UploadedFile,
    selected_languages: Sequence,
    gateway: Optional[TranslationGateway] = None,
    config: Optional[PipelineConfig] = None,
    progress_callback: Optional[ProgressCallback] = None
) -> PipelineResult:
    """
    Process one document with a default HTTP gateway.

    The gateway is closed afterwards only if it was created here.
    """
    config = config or PipelineConfig()
    owns_gateway = gateway is None
    if gateway is None:
        gateway = HttpTranslationGateway(config.translation_api_url, config.timeout)
    try:
        pipeline = DocumentPipeline(gateway, config)
        return await pipeline.process(file, selected_languages, progress_callback)
    finally:
        if owns_gateway:
            await gateway.close()


__all__ = [
    'PipelineContext',
    'PipelineStep',
    'ExtractionStep',
    'IdentificationStep',
    'TranslationStep',
    'SummarizationStep',
    'DocumentPipeline',
    'process',
]
