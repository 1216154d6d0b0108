from collections.abc import Mapping
from typing import Callable, Union

from markupsafe import Markup

from quota_admin.constants.labels import ROW_CLASS, SELECTED_CLASS
from quota_admin.core.templates import templates
from quota_admin.schemas.config_version import ConfigRecordLabels, ConfigVersionRecord, resolve_labels


class MissingRequiredInput(ValueError):
    """Raised when a config row is built without its record or its callback."""


class ConfigRecordView:
    """
    Clickable row showing one config version: version, author and UTC date.

    The view is render-only. A click is forwarded to ``on_select`` without
    arguments; the caller decides what selecting the record means.
    """

    template_name = "config_record.html"

    def __init__(
        self,
        record: Union[ConfigVersionRecord, Mapping],
        on_select: Callable[[], None],
        selected: bool = False,
    ):
        if record is None:
            raise MissingRequiredInput("A config record is required")
        if not callable(on_select):
            raise MissingRequiredInput("on_select must be callable")

        if isinstance(record, Mapping):
            record = ConfigVersionRecord.model_validate(record)
        elif not isinstance(record, ConfigVersionRecord):
            raise MissingRequiredInput(f"Expected a config record, got {type(record).__name__}")

        self._record = record
        self._on_select = on_select
        self.selected = selected

    @property
    def record(self) -> ConfigVersionRecord:
        return self._record

    @property
    def key(self) -> int:
        return self._record.key

    @property
    def labels(self) -> ConfigRecordLabels:
        return resolve_labels(self._record)

    def render(self) -> Markup:
        css_class = f"{ROW_CLASS} {SELECTED_CLASS}" if self.selected else ROW_CLASS
        html = templates.get_template(self.template_name).render(
            css_class=css_class,
            key=self.key,
            labels=self.labels,
        )
        return Markup(html)

    def click(self) -> None:
        self._on_select()

    def __html__(self) -> str:
        return str(self.render())
