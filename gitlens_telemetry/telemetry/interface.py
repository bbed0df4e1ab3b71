"""
Telemetry provider interface

Defines the methods every telemetry backend offers to the extension, so the
calling code does not depend on a particular SDK.
"""

import abc
from typing import Dict, Mapping, Optional, Union

from opentelemetry.trace import Span

from gitlens_telemetry.utils.timeutils import TimeInput

AttributeValue = Union[str, bool, int, float]
Attributes = Mapping[str, AttributeValue]


class TelemetryProvider(abc.ABC):
    """Interface implemented by every telemetry provider"""

    @abc.abstractmethod
    def send_event(self,
                   name: str,
                   data: Optional[Attributes] = None,
                   start_time: Optional[TimeInput] = None,
                   end_time: Optional[TimeInput] = None) -> None:
        """Record a complete event

        Args:
            name: Event name
            data: Event-specific attributes, applied over the global attributes
            start_time: Event start, defaults to now
            end_time: Event end, defaults to now
        """
        pass

    @abc.abstractmethod
    def start_event(self,
                    name: str,
                    data: Optional[Attributes] = None,
                    start_time: Optional[TimeInput] = None) -> Span:
        """Open a span the caller must end

        Args:
            name: Event name
            data: Event-specific attributes, applied over the global attributes
            start_time: Event start, defaults to now

        Returns:
            Span: The open span
        """
        pass

    @abc.abstractmethod
    def set_global_attributes(self, attributes: Attributes) -> None:
        """Replace the attributes added to every subsequent event"""
        pass

    @abc.abstractmethod
    def dispose(self) -> None:
        """Release the provider's resources"""
        pass


def merge_attributes(global_attributes: Dict[str, AttributeValue],
                     data: Optional[Attributes]) -> Dict[str, AttributeValue]:
    """Overlay event data on the global attributes; data wins on conflict"""
    attributes = dict(global_attributes)
    if data is not None:
        attributes.update(data)
    return attributes
