# resource_lifecycle/resources/base.py

from abc import ABC, abstractmethod

from resource_lifecycle.errors import CopyForbiddenError


class NamedResource(ABC):
    """
    Абстрактный базовый класс для всех ресурсов с именем.
    Единственная возможность — get_name(). Копирование запрещено
    (copy, deepcopy, pickle): ресурс может иметь только одного владельца.
    Передача владения реализуется в наследниках собственными операциями
    перемещения (см. ResourceHandle.take / move_assign).
    """

    __slots__ = ()

    @abstractmethod
    def get_name(self) -> str:
        """
        :return: текущее имя ресурса (пустое для перемещённой «оболочки»)
        """
        ...

    def __copy__(self):
        raise CopyForbiddenError(f"{self.__class__.__name__} cannot be copied; transfer ownership instead")

    def __deepcopy__(self, memo):
        raise CopyForbiddenError(f"{self.__class__.__name__} cannot be deep-copied; transfer ownership instead")

    def __reduce_ex__(self, protocol):
        raise CopyForbiddenError(f"{self.__class__.__name__} cannot be pickled")
