"""
Propagation Engine — синхронизация live bounds и перенос между колёсами

Вызывается ровно один раз на каждое изменение одного колеса пользователем,
с (slot, old_value, new_value). Порядок шагов:
1. Wraparound carry: 9 → live_min означает перекат через верх колеса,
   +1 переносится в предыдущий (более старший) разряд
2. Max-boundary: new_value == live_max → если префикс совпадает с
   цифрами max_value, суффикс прижимается к max bound digits
3. Min-boundary: new_value == live_min → зеркально для min_value
4. Выход с границы: old_value был на live_min/live_max → суффикс
   освобождается

Шаг 2 выполняется раньше шага 3; шаг 3 выполняется, только если шаг 2
вернул "continue" (префикс не совпал).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. live_min <= value <= live_max для каждого слота после прохода
2. assemble(vector) ∈ [min_value, max_value] после прохода
3. Каждый обход идёт строго к индексу 0 или строго к последнему индексу,
   поэтому проход конечен (не длиннее вектора)
"""

import logging

from src.numpicker.bounds import DIGIT_MAX, DIGIT_MIN
from src.numpicker.digit_vector import DigitSlot, DigitVector

logger = logging.getLogger(__name__)


# =============================================================================
# PREFIX MATCHING
# =============================================================================


def prefix_matches_max(vector: DigitVector, slot: DigitSlot) -> bool:
    """Все слоты старше slot равны своим max bound digits."""
    previous = vector.previous(slot)
    while previous is not None:
        if previous.value != previous.max_bound_digit:
            return False
        previous = vector.previous(previous)
    return True


def prefix_matches_min(vector: DigitVector, slot: DigitSlot) -> bool:
    """Все слоты старше slot равны своим min bound digits."""
    previous = vector.previous(slot)
    while previous is not None:
        if previous.value != previous.min_bound_digit:
            return False
        previous = vector.previous(previous)
    return True


# =============================================================================
# BOUND RECOMPUTATION
# =============================================================================


def settle(vector: DigitVector, slot: DigitSlot) -> None:
    """
    Пересчёт live bounds от slot до младшего разряда.

    Пока префикс совпадает с max_value, live_max = max_bound_digit,
    иначе 9. Пока префикс совпадает с min_value, live_min = min_bound_digit,
    иначе 0. Значения прижимаются к новым границам по ходу обхода, так что
    совпадение префикса для следующего слота считается по уже прижатому
    значению.
    """
    at_max = prefix_matches_max(vector, slot)
    at_min = prefix_matches_min(vector, slot)

    current = slot
    while current is not None:
        live_max = current.max_bound_digit if at_max else DIGIT_MAX
        live_min = current.min_bound_digit if at_min else DIGIT_MIN
        current.set_live_bounds(live_min, live_max)

        at_max = at_max and current.value == current.max_bound_digit
        at_min = at_min and current.value == current.min_bound_digit
        current = vector.next(current)


def release_suffix(vector: DigitVector, slot: DigitSlot) -> None:
    """Префикс больше не фиксирует суффикс: освобождение слотов после slot."""
    following = vector.next(slot)
    if following is not None:
        settle(vector, following)


def check_max_boundary(vector: DigitVector, slot: DigitSlot) -> bool:
    """
    Сужение суффикса по max_value.

    Returns:
        True, если префикс не совпадает с max_value (суффикс не ограничен
        сверху, решение за следующими проверками); False, если проверка
        выполнена или slot является младшим разрядом.
    """
    if vector.next(slot) is None:
        return False

    if not prefix_matches_max(vector, slot):
        return True

    logger.debug("max prefix matched at position %d, clamping suffix", slot.position)
    settle(vector, slot)
    return False


def check_min_boundary(vector: DigitVector, slot: DigitSlot) -> bool:
    """Зеркало check_max_boundary для min_value."""
    if vector.next(slot) is None:
        return False

    if not prefix_matches_min(vector, slot):
        return True

    logger.debug("min prefix matched at position %d, clamping suffix", slot.position)
    settle(vector, slot)
    return False


# =============================================================================
# CARRY
# =============================================================================


def carry_up(vector: DigitVector, slot: DigitSlot) -> None:
    """
    Перенос +1 в старший разряд после переката slot через 9.

    Слоты, стоящие на своём live_max, обнуляются и перенос идёт дальше.
    Если переносить некуда (старший разряд на максимуме), выполняется
    только проверка max-boundary: хост не должен допускать переход
    за max_value.
    """
    previous = vector.previous(slot)
    if previous is None:
        return

    # slot больше не является крайним по min_value
    slot.set_live_bounds(DIGIT_MIN, slot.live_max)

    while True:
        if not previous.at_live_max:
            previous.value += 1
            logger.debug("carry into position %d -> %d", previous.position, previous.value)
            break

        before = vector.previous(previous)
        if before is None:
            logger.debug("carry reached position %d at its maximum", previous.position)
            break

        previous.value = DIGIT_MIN
        previous = before

    if not previous.at_live_max or check_max_boundary(vector, previous):
        settle(vector, previous)


# =============================================================================
# ENTRY POINTS
# =============================================================================


def _propagate(
    vector: DigitVector, slot: DigitSlot, old_value: int, new_value: int
) -> None:
    if old_value == DIGIT_MAX and new_value == slot.live_min and old_value != new_value:
        carry_up(vector, slot)

    # carry мог прижать значение slot
    value = slot.value

    should_continue = True

    if value == slot.live_max:
        should_continue = check_max_boundary(vector, slot)

    if should_continue and value == slot.live_min:
        should_continue = check_min_boundary(vector, slot)

    if (
        should_continue
        and value != old_value
        and old_value in (slot.live_min, slot.live_max)
    ):
        release_suffix(vector, slot)


def apply_change(vector: DigitVector, position: int, new_value: int) -> None:
    """
    Изменение одного колеса с полной пропагацией (in place).

    Args:
        vector: Вектор сессии
        position: Индекс изменённого слота
        new_value: Новое значение колеса (шаг ±1 или перекат колеса)
    """
    slot = vector[position]
    old_value = slot.value
    slot.value = new_value

    logger.debug("slot %d changed %d -> %d", position, old_value, new_value)
    _propagate(vector, slot, old_value, new_value)


def propagate(
    vector: DigitVector, position: int, old_value: int, new_value: int
) -> DigitVector:
    """
    Чистая версия пропагации: (vector, position, old, new) -> vector'.

    Исходный вектор не изменяется.
    """
    result = vector.copy()
    slot = result[position]
    slot.value = new_value
    _propagate(result, slot, old_value, new_value)
    return result
