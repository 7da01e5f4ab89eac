"""Pydantic models mirroring the dictionary search response

Only the path down to the meaning values is modelled. Every level defaults to
empty so that absent fields decode to an empty result instead of failing.
JSON ``null`` is treated the same as an absent field.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ResponseModel(BaseModel):
    """Base for response models: unknown keys ignored, nulls read as absent"""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Mean(ResponseModel):
    """A single meaning fragment, usually with inline markup"""

    value: str = Field(default="", description="Raw meaning text")


class MeansCollector(ResponseModel):
    """Group of meanings for one part of speech"""

    means: list[Mean] = Field(default_factory=list)


class Item(ResponseModel):
    """One dictionary entry matching the query"""

    means_collector: list[MeansCollector] = Field(
        default_factory=list, alias="meansCollector"
    )


class WordResult(ResponseModel):
    items: list[Item] = Field(default_factory=list)


class SearchResultListMap(ResponseModel):
    word: WordResult = Field(default_factory=WordResult, alias="WORD")


class SearchResultMap(ResponseModel):
    search_result_list_map: SearchResultListMap = Field(
        default_factory=SearchResultListMap, alias="searchResultListMap"
    )


class DictionaryResponse(ResponseModel):
    """Top-level dictionary search response"""

    search_result_map: SearchResultMap = Field(
        default_factory=SearchResultMap, alias="searchResultMap"
    )

    @property
    def items(self) -> list[Item]:
        """Word entries of the response"""
        return self.search_result_map.search_result_list_map.word.items
