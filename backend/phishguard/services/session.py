# Name: session.py
# Description: Analysis session state and the single-flight analysis orchestrator
# Date: 2026-10-16

import logging
import time
from typing import Optional

from phishguard.core.errors import AnalysisError, USER_ERROR_MESSAGE
from phishguard.core.security import safe_log_preview
from phishguard.models.analysis import AnalysisResult, HistoryItem, SessionSnapshot
from phishguard.services.gemini_service import Classifier, build_prompt, parse_analysis_result
from phishguard.services.history import HistoryStore
from phishguard.services.presentation import security_score

# Configure logging
logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Process-local UI session.
    
    Holds the input text, the result or error currently on display, the
    in-flight flag and the history. Only one analysis may run at a time;
    a submission while one is in flight is ignored rather than queued.
    
    Attributes:
        input_text: Current contents of the input area
        result: Result on display, or None
        error: User-facing error message, or None
        analyzing: True while a classification call is in flight
        history: Bounded store of past analyses
        scroll_to_result: One-shot cue asking the UI to bring the result into view
    """
    
    def __init__(self, classifier: Classifier, history: Optional[HistoryStore] = None):
        self._classifier = classifier
        self.input_text: str = ""
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None
        self.analyzing: bool = False
        self.history = history if history is not None else HistoryStore()
        self.scroll_to_result: bool = False
    
    # =========================================================================
    # ANALYSIS
    # =========================================================================
    
    async def analyze(self, email_text: Optional[str] = None) -> Optional[AnalysisResult]:
        """
        Classify an email and update the session.
        
        1. Ignore the call if an analysis is in flight or the text is blank
        2. Clear the previous result and error, enter the analyzing state
        3. Send the delimited prompt with the JSON schema to the classifier
        4. Validate the response strictly
        5. On success, show the result and prepend it to history
        6. On failure, show the generic error and leave history untouched
        7. Leave the analyzing state in every case
        
        Args:
            email_text: Text to analyze; defaults to the current input text
            
        Returns:
            The new AnalysisResult, or None if the call was ignored or failed
        """
        if self.analyzing:
            logger.info("[ANALYZE] IGNORED - analysis already in progress")
            return None
        
        text = self.input_text if email_text is None else email_text
        if not text.strip():
            logger.debug("[ANALYZE] IGNORED - empty input")
            return None
        
        self.input_text = text
        self.analyzing = True
        self.error = None
        self.result = None
        self.scroll_to_result = False
        
        start_time = time.perf_counter()
        logger.info(f"[ANALYZE] START chars={len(text)} preview='{safe_log_preview(text)}'")
        
        try:
            raw_response = await self._classifier.classify(build_prompt(text))
            result = parse_analysis_result(raw_response)
        except AnalysisError as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(f"[ANALYZE] FAILED {type(e).__name__}: {e} ({elapsed_ms:.0f}ms)")
            self.error = USER_ERROR_MESSAGE
            return None
        finally:
            self.analyzing = False
        
        self.result = result
        self.history.record(HistoryItem.create(text, result))
        self.scroll_to_result = True
        
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"[ANALYZE] COMPLETE phishing={result.is_phishing} risk={result.risk_level} "
            f"indicators={len(result.suspicious_indicators)} history={len(self.history)} "
            f"elapsed={elapsed_ms:.0f}ms"
        )
        return result
    
    # =========================================================================
    # UI ACTIONS
    # =========================================================================
    
    def set_input(self, text: str) -> None:
        self.input_text = text
    
    def clear_all(self) -> None:
        """Reset input, result and error. History is kept."""
        self.input_text = ""
        self.result = None
        self.error = None
        self.scroll_to_result = False
    
    def select_history(self, item_id: str) -> bool:
        """
        Restore a past result as the current view without a new call.
        
        Only the stored preview is available, so the input area receives the
        (possibly truncated) preview rather than the full original email.
        
        Returns:
            True if the item was found, False otherwise
        """
        item = self.history.select(item_id)
        if item is None:
            logger.info(f"[HISTORY] Item {item_id} not found")
            return False
        
        self.result = item.result
        self.input_text = item.email_preview
        self.error = None
        self.scroll_to_result = False
        logger.debug(f"[HISTORY] Restored item {item_id}")
        return True
    
    def consume_scroll_cue(self) -> bool:
        """Return the pending scroll cue once, then reset it."""
        cue = self.scroll_to_result
        self.scroll_to_result = False
        return cue
    
    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            input_text=self.input_text,
            result=self.result,
            error=self.error,
            analyzing=self.analyzing,
            history=list(self.history.items()),
            total_scanned=len(self.history),
            threats_detected=self.history.phishing_count(),
            security_score=security_score(self.result) if self.result is not None else None,
        )
