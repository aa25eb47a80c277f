import abc
from typing import Generic, Iterable, TypeVar


TModel = TypeVar("TModel")
TRecord = TypeVar("TRecord")


class BaseRecordMapper(abc.ABC, Generic[TModel, TRecord]):
    """Two-way conversion between a domain model and the record shape kept in local storage."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TRecord:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TRecord) -> TModel:
        pass

    @classmethod
    def to_entities(cls, models: Iterable[TModel]) -> list[TRecord]:
        return [cls.to_entity(model) for model in models]

    @classmethod
    def to_models(cls, entities: Iterable[TRecord]) -> list[TModel]:
        return [cls.to_model(entity) for entity in entities]
