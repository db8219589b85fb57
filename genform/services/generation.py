"""Generation session and its submission lifecycle.

A session owns the form for one selected model: the field values, the
per-field errors, the lifecycle state and the results collected so far.
Every mutation goes through a named method; pricing and validation only
read the values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from genform.config import Settings, get_settings
from genform.modelspecs.base import ModelDescriptor
from genform.modelspecs.registry import get_model
from genform.services import pricing, validation
from genform.services.cloudinary import UploadError
from genform.services.defaults import FieldValues, compute_defaults
from genform.services.drafts import Draft, persistable_values
from genform.services.fal_client import InferenceError
from genform.services.params import finalize, has_pending_files, prepare, upload_files
from genform.services.preferences import ModelPreferences
from genform.services.provider import DraftStore, InferenceClient, UploadClient
from genform.services.visibility import visible_fields
from genform.utils.logging import get_logger
from genform.utils.time import utcnow


logger = get_logger('generation')


class GenerationState(str, Enum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    UPLOADING = 'uploading'
    GENERATING = 'generating'
    SUCCESS = 'success'
    ERROR = 'error'


IN_FLIGHT = frozenset({GenerationState.VALIDATING, GenerationState.UPLOADING, GenerationState.GENERATING})


class GenerationBusyError(RuntimeError):
    pass


@dataclass(frozen=True)
class ResultArtifact:
    url: str
    media: str
    model_id: str
    request_id: Optional[str] = None
    created_at: Any = field(default_factory=utcnow)


def _tab_value(tab: Any) -> Optional[str]:
    if tab is None:
        return None
    return str(tab.value if isinstance(tab, Enum) else tab)


class GenerationSession:
    def __init__(
        self,
        uploader: UploadClient,
        inference: InferenceClient,
        draft_store: DraftStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.uploader = uploader
        self.inference = inference
        self.draft_store = draft_store
        self.settings = settings or get_settings()
        self.preferences = ModelPreferences(self.settings.recent_models_limit)

        self.model: Optional[ModelDescriptor] = None
        self.tab: Optional[str] = None
        self.field_values: FieldValues = {}
        self.field_errors: validation.FieldErrors = {}
        self.state = GenerationState.IDLE
        self.error: Optional[str] = None
        self.results: List[ResultArtifact] = []

    @property
    def is_busy(self) -> bool:
        return self.state in IN_FLIGHT

    def _require_model(self) -> ModelDescriptor:
        if self.model is None:
            raise ValueError('No model selected')
        return self.model

    def _transition(self, state: GenerationState) -> None:
        if state == self.state:
            return
        logger.info(
            'generation_state',
            state=state.value,
            previous=self.state.value,
            model=self.model.id if self.model else None,
        )
        self.state = state

    def _fail(self, message: str) -> GenerationState:
        self.error = message
        self._transition(GenerationState.ERROR)
        return self.state

    def _settle(self) -> None:
        # Any edit after a finished submission makes the form idle again.
        if self.state in (GenerationState.SUCCESS, GenerationState.ERROR):
            self.error = None
            self._transition(GenerationState.IDLE)

    def _select(self, model: ModelDescriptor) -> None:
        self.model = model
        self.field_values = compute_defaults(model)
        self.field_errors = {}
        self.error = None
        self._transition(GenerationState.IDLE)

    # --- model and tab ---

    def set_model(self, model: ModelDescriptor | str) -> ModelDescriptor:
        if self.is_busy:
            raise GenerationBusyError('Cannot switch models while a generation is in progress')
        if isinstance(model, str):
            found = get_model(model)
            if found is None:
                raise ValueError(f'Unknown model: {model}')
            model = found
        self._select(model)
        self.preferences.add_recent(model.id)
        return model

    def set_tab(self, tab: Any) -> None:
        """Switch tabs, dropping the form state of the previous one.

        A selected model that does not serve the new tab is deselected.
        """
        if self.is_busy:
            raise GenerationBusyError('Cannot switch tabs while a generation is in progress')
        self.tab = _tab_value(tab)
        if self.model is not None and self.tab and not self.model.supports_tab(self.tab):
            logger.info('model_deselected', model=self.model.id, tab=self.tab)
            self.model = None
            self.field_values = {}
            self.field_errors = {}
            self.error = None
            self._transition(GenerationState.IDLE)
        elif self.model is not None:
            self._select(self.model)

    # --- field values ---

    def update_field(self, name: str, value: Any) -> Optional[str]:
        model = self._require_model()
        self.field_values[name] = value
        error = validation.validate_field(name, value, self.tab, model)
        if error:
            self.field_errors[name] = error
        else:
            self.field_errors.pop(name, None)
        self._settle()
        return error

    def update_fields(self, values: Mapping[str, Any]) -> None:
        self.field_values.update(values)
        self._settle()

    def reset_fields(self) -> None:
        self.field_values = compute_defaults(self.model) if self.model else {}
        self.field_errors = {}
        self._settle()

    def get_field_value(self, name: str, default: Any = None) -> Any:
        return self.field_values.get(name, default)

    def load_draft(self, values: Mapping[str, Any]) -> FieldValues:
        """Merge restored values into the form and re-check each of them."""
        model = self._require_model()
        for name, value in values.items():
            self.field_values[name] = value
            error = validation.validate_field(name, value, self.tab, model)
            if error:
                self.field_errors[name] = error
            else:
                self.field_errors.pop(name, None)
        self._settle()
        return self.field_values

    # --- errors ---

    def validate_field(self, name: str) -> Optional[str]:
        model = self._require_model()
        error = validation.validate_field(name, self.field_values.get(name), self.tab, model)
        if error:
            self.field_errors[name] = error
        else:
            self.field_errors.pop(name, None)
        return error

    def validate_all(self) -> validation.FieldErrors:
        model = self._require_model()
        self.field_errors = validation.validate_all(self.field_values, self.tab, model)
        return self.field_errors

    def is_valid(self) -> bool:
        model = self._require_model()
        return validation.is_valid(self.field_values, self.tab, model, self.field_errors)

    def set_field_error(self, name: str, message: Optional[str]) -> None:
        if message:
            self.field_errors[name] = message
        else:
            self.field_errors.pop(name, None)

    def clear_errors(self) -> None:
        self.field_errors = {}

    # --- derived views ---

    def estimate(self) -> Optional[pricing.CostResult]:
        if self.model is None:
            return None
        return pricing.calculate(self.model, self.field_values)

    def visible_fields(self) -> List[str]:
        if self.model is None:
            return []
        return visible_fields(self.model, self.tab)

    # --- submission ---

    async def submit(self) -> GenerationState:
        """Validate, upload pending files, then run inference.

        Failures land in ``error`` with state ``ERROR``; the field values are
        left as they were so the user can fix and retry.
        """
        if self.is_busy:
            raise GenerationBusyError('A generation is already in progress')
        model = self._require_model()
        self.error = None

        self._transition(GenerationState.VALIDATING)
        errors = self.validate_all()
        if errors:
            return self._fail(next(iter(errors.values())))

        try:
            params = prepare(self.field_values, model)
            if has_pending_files(params):
                self._transition(GenerationState.UPLOADING)
                params = await upload_files(params, self.uploader)
            payload = finalize(params, model)
            self._transition(GenerationState.GENERATING)
            result = await self.inference.generate(model.endpoint, payload)
        except UploadError as exc:
            logger.warning('generation_upload_failed', model=model.id, error=str(exc))
            return self._fail(str(exc))
        except InferenceError as exc:
            logger.warning('generation_failed', model=model.id, status=exc.status_code, error=str(exc))
            return self._fail(str(exc))
        except Exception as exc:
            logger.exception('generation_crashed', model=model.id, state=self.state.value)
            return self._fail(str(exc) or 'Generation failed')

        if not result.success:
            logger.warning('generation_failed', model=model.id, error=result.error)
            return self._fail(result.error or 'Generation failed')

        for url in result.result_urls:
            self.results.append(ResultArtifact(url=url, media=model.media, model_id=model.id, request_id=result.request_id))
        self._transition(GenerationState.SUCCESS)
        return self.state

    def reset(self) -> None:
        if self.is_busy:
            raise GenerationBusyError('Cannot reset while a generation is in progress')
        self.error = None
        self.field_errors = {}
        self._transition(GenerationState.IDLE)

    def clear_results(self) -> None:
        self.results = []

    # --- drafts ---

    def to_draft(self) -> Draft:
        return Draft(
            model_id=self.model.id if self.model else None,
            tab=self.tab,
            field_values=persistable_values(self.field_values),
            recent_models=list(self.preferences.recent),
            favorite_models=list(self.preferences.favorites),
        )

    def restore_draft(self, draft: Draft) -> bool:
        """Bring back a saved form; returns False when its model no longer exists."""
        self.preferences.restore(draft.recent_models, draft.favorite_models)
        self.tab = _tab_value(draft.tab)
        model = get_model(draft.model_id) if draft.model_id else None
        if model is None:
            logger.info('draft_model_missing', model=draft.model_id)
            return False
        self._select(model)
        self.load_draft(draft.field_values)
        logger.info('draft_restored', model=model.id, tab=self.tab, fields=len(draft.field_values))
        return True

    def save_draft(self) -> Optional[Draft]:
        if self.draft_store is None:
            return None
        draft = self.to_draft()
        self.draft_store.save(self.settings.draft_namespace, draft)
        return draft

    def restore_from_store(self) -> bool:
        if self.draft_store is None:
            return False
        draft = self.draft_store.load(self.settings.draft_namespace)
        if draft is None:
            return False
        return self.restore_draft(draft)

    def clear_draft(self) -> None:
        if self.draft_store is not None:
            self.draft_store.clear(self.settings.draft_namespace)

    def toggle_favorite(self, model_id: str) -> bool:
        return self.preferences.toggle_favorite(model_id)
