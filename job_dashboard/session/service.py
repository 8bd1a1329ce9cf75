"""Search orchestration for the dashboard."""

import itertools
import threading
from typing import Optional

from job_dashboard.clients import (
    CareerjetProxyClient,
    ClientError,
    JobSearchClient,
    ResumeExtractorClient,
    build_clients,
)
from job_dashboard.config.models import AppConfig
from job_dashboard.domain.models import (
    FilterCriteria,
    JobSource,
    ResumeProfile,
    SearchParameters,
)
from job_dashboard.filtering import FilterEngine
from job_dashboard.logging import get_logger
from job_dashboard.logging.context import log_context
from job_dashboard.normalization import RecordNormalizer
from job_dashboard.utils.timestamps import utc_now

from .models import DisplayState, SearchOutcome

logger = get_logger(__name__, component="session")


class SearchInputError(ValueError):
    """User input was rejected before any network call."""


class SearchSession:
    """
    Runs dashboard actions and owns the current display state.

    Network actions (resume search, parameter search) each take a token from a
    strictly increasing counter. When an action finishes, its outcome is only
    applied if no newer action has been dispatched meanwhile; otherwise it is
    marked stale and dropped. Filtering works on the last applied results and
    needs no network call.
    """

    def __init__(
        self,
        app_config: AppConfig,
        extractor: ResumeExtractorClient,
        job_search: JobSearchClient,
        careerjet: CareerjetProxyClient,
        normalizer: Optional[RecordNormalizer] = None,
    ):
        """
        Initialize the search session.

        Args:
            app_config: Application configuration
            extractor: Resume extraction client
            job_search: Job-search service client
            careerjet: Listing proxy client
            normalizer: Record normalizer (defaults to one capped by
                advanced.max_records_per_source)
        """
        self.app_config = app_config
        self.extractor = extractor
        self.job_search = job_search
        self.careerjet = careerjet
        self.normalizer = normalizer or RecordNormalizer(
            max_records=app_config.advanced.max_records_per_source
        )

        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._latest_token = 0
        self._display = DisplayState()

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "SearchSession":
        """Build a session with clients created from configuration."""
        clients = build_clients(app_config)
        return cls(
            app_config,
            extractor=clients.resume_extractor,
            job_search=clients.job_search,
            careerjet=clients.careerjet,
        )

    @property
    def display(self) -> DisplayState:
        """Current display state."""
        with self._lock:
            return self._display

    def close(self) -> None:
        """Close all client sessions."""
        self.extractor.close()
        self.job_search.close()
        self.careerjet.close()

    def search_from_resume(self, file_name: str, content: Optional[bytes]) -> SearchOutcome:
        """
        Upload a resume, search every source, and normalize the results.

        Upstream failures never propagate: each becomes a user-facing message
        in ``outcome.errors`` and an empty collection for the affected source.

        Args:
            file_name: Name of the uploaded file
            content: File bytes

        Returns:
            SearchOutcome (check ``stale`` before trusting it as current)

        Raises:
            SearchInputError: If no file content was given (no network call is made)
        """
        if not content:
            raise SearchInputError("Please select a resume file to upload")

        token = self._begin()
        outcome = SearchOutcome(request_token=token, action="resume_search", started_at=utc_now())

        with log_context(request_token=token, action=outcome.action):
            logger.info(
                f"Resume search started for {file_name}",
                extra={"event": "session.search.started", "file_name": file_name},
            )

            try:
                profile = self.extractor.extract(file_name, content)
            except ClientError as e:
                self._record_failure(outcome, "Resume extraction", e)
                return self._finish(outcome)

            outcome.profile = profile
            parameters = self.build_parameters(profile)

            self._run_job_search(parameters, outcome)
            self._run_careerjet(parameters, outcome)

            return self._finish(outcome)

    def search_with_filters(self, parameters: SearchParameters) -> SearchOutcome:
        """
        Re-query the job-search service with explicit parameters.

        The listing proxy is not consulted; its tab is empty in the outcome.

        Args:
            parameters: Search parameters to send

        Returns:
            SearchOutcome
        """
        token = self._begin()
        outcome = SearchOutcome(
            request_token=token, action="parameter_search", started_at=utc_now()
        )

        with log_context(request_token=token, action=outcome.action):
            logger.info(
                "Parameter search started",
                extra={"event": "session.search.started", "keyword": parameters.keyword},
            )
            self._run_job_search(parameters, outcome)
            return self._finish(outcome)

    def apply_filters(self, criteria: FilterCriteria) -> DisplayState:
        """
        Filter the last search results in memory.

        Each source is filtered independently. Criteria with nothing set leave
        the results unchanged and the state unfiltered.

        Args:
            criteria: Criteria to apply

        Returns:
            The new display state
        """
        engine = FilterEngine(criteria)
        with self._lock:
            current = self._display
            filtered = engine.apply_all(current.unfiltered_results)
            self._display = DisplayState(
                results={source: result.records for source, result in filtered.items()},
                unfiltered_results=current.unfiltered_results,
                is_filtered=criteria.is_active(),
                criteria=criteria,
                request_token=current.request_token,
            )
            state = self._display

        logger.info(
            "Filters applied",
            extra={
                "event": "session.filters.applied",
                "is_filtered": state.is_filtered,
                "matched": sum(len(records) for records in state.results.values()),
            },
        )
        return state

    def clear_filters(self) -> DisplayState:
        """Restore the unfiltered results of the last search."""
        with self._lock:
            current = self._display
            self._display = DisplayState(
                results=dict(current.unfiltered_results),
                unfiltered_results=current.unfiltered_results,
                request_token=current.request_token,
            )
            state = self._display

        logger.info("Filters cleared", extra={"event": "session.filters.cleared"})
        return state

    def build_parameters(self, profile: ResumeProfile) -> SearchParameters:
        """Turn an extracted profile into search parameters, filling gaps from defaults."""
        defaults = self.app_config.search_defaults
        return SearchParameters(
            name=profile.name,
            college=profile.college,
            branch=profile.branch,
            keyword=profile.keyword,
            location=profile.location or defaults.location,
            experience=profile.experience,
            job_type=profile.job_type or defaults.job_type,
            remote=profile.remote or defaults.remote,
            date_posted=profile.date_posted or defaults.date_posted,
            company=profile.company,
            industry=profile.industry,
            ctc_filters=profile.ctc_filters,
            radius=profile.radius or defaults.radius,
        )

    def _run_job_search(self, parameters: SearchParameters, outcome: SearchOutcome) -> None:
        """Query the job-search service and normalize each returned source."""
        try:
            payloads = self.job_search.search(parameters)
        except ClientError as e:
            self._record_failure(outcome, "Job search", e)
            return

        for source, payload in payloads.items():
            with log_context(source=source.value):
                outcome.results[source] = self.normalizer.normalize_payload(payload, source)

    def _run_careerjet(self, parameters: SearchParameters, outcome: SearchOutcome) -> None:
        """Query the listing proxy and normalize its postings."""
        source = JobSource.CAREERJET
        try:
            postings = self.careerjet.fetch_jobs(
                parameters.keyword, parameters.location, parameters.radius
            )
        except ClientError as e:
            self._record_failure(outcome, "CareerJet search", e)
            return

        with log_context(source=source.value):
            outcome.results[source] = self.normalizer.normalize_items(postings, source)

    def _record_failure(self, outcome: SearchOutcome, step: str, error: ClientError) -> None:
        """Convert a client failure into a user-facing message."""
        outcome.errors.append(f"{step} failed: {error.user_message}")
        logger.error(
            f"{step} failed: {error}",
            extra={
                "event": "session.upstream.failed",
                "step": step,
                "error_type": type(error).__name__,
            },
        )

    def _begin(self) -> int:
        """Take the next request token and mark it as the newest dispatched."""
        with self._lock:
            token = next(self._tokens)
            self._latest_token = token
            return token

    def _finish(self, outcome: SearchOutcome) -> SearchOutcome:
        """Apply the outcome to the display state unless a newer action exists."""
        outcome.finished_at = utc_now()

        with self._lock:
            latest_token = self._latest_token
            if outcome.request_token < latest_token:
                outcome.stale = True
            else:
                self._display = DisplayState(
                    results=dict(outcome.results),
                    unfiltered_results=outcome.results,
                    request_token=outcome.request_token,
                )

        if outcome.stale:
            logger.warning(
                "Discarding stale search response",
                extra={
                    "event": "session.search.stale",
                    "latest_token": latest_token,
                },
            )
        else:
            logger.info(
                "Search completed",
                extra={
                    "event": "session.search.completed",
                    "total_records": outcome.total_records,
                    "error_count": len(outcome.errors),
                    "duration_ms": int(
                        (outcome.finished_at - outcome.started_at).total_seconds() * 1000
                    ),
                },
            )
        return outcome
