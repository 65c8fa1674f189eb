"""NumberPickerDialog — контроллер диалога выбора числа без рендеринга.

Хост отображает заголовок, колёса и кнопки; контроллер хранит сессию,
конфигурацию кнопок и слушателей и решает, что происходит при нажатии:
- positive (confirm): диалог закрывается, затем on_confirm(params, value)
- neutral: on_neutral(params, value, dialog), диалог остаётся открытым
- negative / cancel: on_cancel(params), затем диалог закрывается
- закрытый диалог больше не вызывает on_confirm/on_neutral/on_cancel
- dismiss: on_dismiss(params), ровно один раз

Исключения слушателей не перехватываются.
"""

import logging
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

from src.numpicker.bounds import NumberLike, PickerBounds
from src.numpicker.contracts import dump_snapshot
from src.numpicker.session import PickerSession, VectorSnapshot

logger = logging.getLogger(__name__)

Params = Optional[Dict[str, Any]]
OnConfirmListener = Callable[[Params, float], None]
OnNeutralListener = Callable[[Params, float, "NumberPickerDialog"], None]
OnCancelListener = Callable[[Params], None]


class DialogConfig(BaseModel):
    """Конфигурация диалога: подписи кнопок и непрозрачные params хоста."""

    positive_label: str = Field(..., min_length=1, description="Подпись кнопки подтверждения")
    title: str = Field("", description="Заголовок диалога")
    negative_label: Optional[str] = Field(None, description="Подпись кнопки отмены")
    neutral_label: Optional[str] = Field(None, description="Подпись нейтральной кнопки")
    params: Params = Field(None, description="Возвращаются слушателям как есть")
    tag: str = Field("tag", description="Тег диалога у хоста")

    model_config = {"frozen": True}


class NumberPickerDialog:
    """Контроллер одного диалога поверх PickerSession."""

    def __init__(
        self,
        session: PickerSession,
        config: DialogConfig,
        on_confirm: OnConfirmListener,
        on_cancel: Optional[OnCancelListener] = None,
        on_neutral: Optional[OnNeutralListener] = None,
        on_dismiss: Optional[OnCancelListener] = None,
    ):
        self.session = session
        self.config = config
        self._on_confirm: Optional[OnConfirmListener] = on_confirm
        self._on_cancel = on_cancel
        self._on_neutral = on_neutral
        self._on_dismiss = on_dismiss
        self._dismissed = False

    @classmethod
    def new_instance(
        cls,
        min_value: NumberLike,
        max_value: NumberLike,
        positive_label: str,
        on_confirm: OnConfirmListener,
        default: Optional[NumberLike] = None,
        title: str = "",
        params: Params = None,
        tag: str = "tag",
        negative_label: Optional[str] = None,
        on_cancel: Optional[OnCancelListener] = None,
        neutral_label: Optional[str] = None,
        on_neutral: Optional[OnNeutralListener] = None,
        on_dismiss: Optional[OnCancelListener] = None,
    ) -> "NumberPickerDialog":
        """
        Создание диалога с валидацией диапазона.

        Raises:
            InvalidRangeError: max_value < min_value
            InvalidDefaultError: default вне [min_value, max_value]
        """
        bounds = PickerBounds.from_range(min_value, max_value, default)
        config = DialogConfig(
            positive_label=positive_label,
            title=title,
            negative_label=negative_label,
            neutral_label=neutral_label,
            params=params,
            tag=tag,
        )
        return cls(
            session=PickerSession(bounds),
            config=config,
            on_confirm=on_confirm,
            on_cancel=on_cancel,
            on_neutral=on_neutral,
            on_dismiss=on_dismiss,
        )

    # ---------- STATE ----------

    @property
    def params(self) -> Params:
        return self.config.params

    @property
    def is_dismissed(self) -> bool:
        return self._dismissed

    @property
    def has_negative_action(self) -> bool:
        return self.config.negative_label is not None

    @property
    def has_neutral_action(self) -> bool:
        return self.config.neutral_label is not None

    # ---------- WHEELS ----------

    def on_slot_changed(self, position: int, new_value: int) -> VectorSnapshot:
        return self.session.on_slot_changed(position, new_value)

    def reset(self) -> VectorSnapshot:
        return self.session.reset()

    def get_combined_value(self) -> float:
        return self.session.get_combined_value()

    def state_json(self) -> str:
        """Снапшот колёс в JSON для хоста (валидируется по контракту)."""
        return dump_snapshot(self.session.snapshot())

    # ---------- ACTIONS ----------

    def confirm(self) -> Optional[float]:
        """
        Positive кнопка: закрытие диалога и передача выбранного значения.

        Returns:
            Выбранное значение или None, если диалог уже закрыт
        """
        if self._dismissed:
            return None
        value = self.get_combined_value()
        logger.info("dialog %s confirmed with %s", self.config.tag, value)
        self.dismiss()
        if self._on_confirm is not None:
            self._on_confirm(self.params, value)
        return value

    def neutral(self) -> None:
        if self._dismissed:
            return
        if self._on_neutral is not None:
            self._on_neutral(self.params, self.get_combined_value(), self)

    def cancel(self) -> None:
        """Negative кнопка / back: on_cancel, затем диалог закрывается."""
        if self._dismissed:
            return
        logger.info("dialog %s cancelled", self.config.tag)
        if self._on_cancel is not None:
            self._on_cancel(self.params)
        self.dismiss()

    def dismiss(self) -> None:
        if self._dismissed:
            return
        self._dismissed = True
        if self._on_dismiss is not None:
            self._on_dismiss(self.params)

    def detach(self) -> None:
        """Хост уходит: слушатели больше не вызываются."""
        self._on_confirm = None
        self._on_cancel = None
        self._on_neutral = None
        self._on_dismiss = None
