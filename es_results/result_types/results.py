"""
Generic Elasticsearch result wrapper.
"""

import copy
import json
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from es_results.config.environments import get_results_config
from es_results.utils.decoding import identity
from es_results.utils.response_parser import descend, iter_hit_entries, with_metadata_id
from es_results.utils.validation import validate_result_path

logger = logging.getLogger(__name__)

T = TypeVar("T")

ID_KEY = "_id"


class ElasticResult:
    """
    Parsed response of an Elasticsearch request.

    Subclasses set PATH_TO_RESULT to the slash separated key path under
    which their documents live. The last segment names the key that holds
    the document inside each entry of the container the other segments
    point at.
    """

    PATH_TO_RESULT: Optional[str] = None

    def __init__(
        self,
        json_object: Optional[Dict[str, Any]] = None,
        json_string: Optional[str] = None,
        path_to_result: Optional[str] = None,
        response_code: Optional[int] = None,
        succeeded: bool = True,
        error_message: Optional[str] = None,
        metadata_id_field: Optional[str] = None,
    ):
        self.json_object = json_object
        self.json_string = json_string
        self.path_to_result = path_to_result if path_to_result is not None else self.PATH_TO_RESULT
        self.response_code = response_code
        self.succeeded = succeeded
        self.error_message = error_message
        self.metadata_id_field = metadata_id_field or get_results_config()["metadata_id_field"]

        if self.path_to_result is not None:
            validate_result_path(self.path_to_result.split("/"))

    @classmethod
    def from_response(
        cls,
        response: Any,
        status: Optional[int] = None,
        **kwargs: Any,
    ) -> "ElasticResult":
        """
        Create from a response body.

        Args:
            response: Parsed dict, JSON text/bytes, or an elasticsearch API
                response exposing ``body`` and ``meta.status``
            status: HTTP status, taken from the response object when omitted
            **kwargs: Passed to the constructor

        Returns:
            Result instance; succeeded is False for non-2xx statuses and for
            bodies carrying an ``error`` entry
        """
        meta = getattr(response, "meta", None)
        if hasattr(response, "body") and meta is not None:
            if status is None:
                status = getattr(meta, "status", None)
            response = response.body

        if isinstance(response, (bytes, bytearray)):
            response = response.decode("utf-8")
        if isinstance(response, str):
            json_string = response
            try:
                body = json.loads(response) if response.strip() else None
            except ValueError:
                # Proxies answer with HTML or plain text error pages
                logger.debug("Response body is not JSON (status %s)", status)
                body = None
        else:
            body = response
            json_string = json.dumps(body) if body is not None else None

        json_object = body if isinstance(body, dict) else None
        if status is None:
            status = 200

        succeeded = 200 <= status < 300 and not (json_object and json_object.get("error"))
        error_message = None if succeeded else _error_message(json_object, status)

        return cls(
            json_object=json_object,
            json_string=json_string,
            response_code=status,
            succeeded=succeeded,
            error_message=error_message,
            **kwargs,
        )

    def get_keys(self) -> Optional[List[str]]:
        if self.path_to_result is None:
            return None
        return self.path_to_result.split("/")

    def get_json_map(self) -> Optional[Dict[str, Any]]:
        """Copy of the parsed document that callers may modify freely."""
        return copy.deepcopy(self.json_object)

    def get_value(self, key: str) -> Any:
        if self.json_object is None:
            return None
        return self.json_object.get(key)

    def get_source_as_object(self, decoder: Callable[[Any], T] = identity) -> Optional[T]:
        """Decode the first source found at the result path, if any."""
        sources = self.extract_source()
        if not sources:
            return None
        return decoder(sources[0])

    def get_source_as_object_list(self, decoder: Callable[[Any], T] = identity) -> List[T]:
        """Decode every source found at the result path."""
        return [decoder(source) for source in self.extract_source()]

    def get_source_as_string_list(self) -> List[str]:
        return [json.dumps(source) for source in self.extract_source()]

    def extract_source(self) -> List[Any]:
        """
        Collect the raw sources found at the result path.

        Without a path the whole document is the only source. Entries
        lacking the source key are skipped, and an entry's _id is copied
        into its source under the metadata id field.

        Raises:
            PathTraversalError: If the path crosses a missing key or a
                non-object
        """
        if self.json_object is None:
            return []

        keys = self.get_keys()
        if keys is None:
            return [self.json_object]

        source_key = keys[-1]
        if len(keys) == 1:
            source = self.json_object.get(source_key)
            return [] if source is None else [source]

        sources = []
        container = descend(self.json_object, keys[:-1])
        for entry in iter_hit_entries(container):
            if not isinstance(entry, dict) or entry.get(source_key) is None:
                logger.debug("Skipping entry without '%s'", source_key)
                continue
            sources.append(with_metadata_id(entry[source_key], entry.get(ID_KEY), self.metadata_id_field))
        return sources

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(succeeded={self.succeeded!r}, "
            f"response_code={self.response_code!r}, path_to_result={self.path_to_result!r})"
        )


def _error_message(json_object: Optional[Dict[str, Any]], status: int) -> str:
    error = json_object.get("error") if json_object else None
    if isinstance(error, dict):
        reason = error.get("reason") or error.get("type")
        if reason:
            return str(reason)
    elif error:
        return str(error)
    return f"Request failed with status {status}"
