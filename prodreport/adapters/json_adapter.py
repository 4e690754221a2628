from __future__ import annotations

import json
from typing import Any, List, Sequence

from pydantic import BaseModel, TypeAdapter

from prodreport.models.event_data import DispatchRecord, Event

import logging

logger = logging.getLogger(__name__)


def load_json(file_path: str) -> Any:
    with open(file_path, "r", encoding="utf-8") as json_file:
        data = json.load(json_file)
    return data


class JsonEventAdapter:
    """
    JsonEventAdapter reads and writes events and dispatch records from and to json files.

    A file contains either a list of records or an object with the records stored under the keys
    "events" and "dispatches".
    """

    def read_events(self, file_path: str) -> List[Event]:
        """
        Reads the events from the given file path.

        Args:
            file_path (str): Path to the json file.

        Returns:
            List[Event]: Events in file order.
        """
        data = load_json(file_path=file_path)
        if isinstance(data, dict):
            data = data.get("events", [])
        return TypeAdapter(List[Event]).validate_python(data)

    def read_dispatches(self, file_path: str) -> List[DispatchRecord]:
        """
        Reads the dispatch records from the given file path.

        Args:
            file_path (str): Path to the json file.

        Returns:
            List[DispatchRecord]: Dispatch records in file order.
        """
        data = load_json(file_path=file_path)
        if isinstance(data, dict):
            data = data.get("dispatches", [])
        return TypeAdapter(List[DispatchRecord]).validate_python(data)

    def write_data(self, file_path: str, records: Sequence[BaseModel]):
        """
        Writes events or dispatch records as a json list to the given file path.

        Args:
            file_path (str): Path to the json file.
            records (Sequence[BaseModel]): Records to write.
        """
        data = [record.model_dump(mode="json", by_alias=True) for record in records]
        with open(file_path, "w", encoding="utf-8") as json_file:
            json.dump(data, json_file, indent=4)
        logger.info(f"Wrote {len(data)} records to {file_path}.")
