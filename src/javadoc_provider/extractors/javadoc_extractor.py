"""Marker-based extraction of documentation fragments from JavaDoc HTML.

The functions in this module do not parse HTML. They locate fixed literal
markers inside the page text and cut out the plain text that follows them,
up to the next '<'. Every function is a pure function of its arguments.
"""

from typing import List, Optional
import logging

from javadoc_provider.config import MARKERS
from javadoc_provider.data_models import (
    TagDialect,
    OperationKey,
    ClassDocumentation,
    MethodDocumentation,
)

logger = logging.getLogger(__name__)


def _find(text: str, marker: str, start: int = 0) -> Optional[int]:
    index = text.find(marker, start)
    return None if index == -1 else index


def locate_class_block(text: str, simple_name: str, is_interface: bool) -> Optional[int]:
    """Find the heading of a class or interface page.

    Args:
        text: JavaDoc page text
        simple_name: Unqualified type name
        is_interface: Whether to look for "Interface X" instead of "Class X"

    Returns:
        Offset just past the first "Class X"/"Interface X" marker, or None
    """
    qualifier = MARKERS.INTERFACE_QUALIFIER if is_interface else MARKERS.CLASS_QUALIFIER
    class_marker = f"{qualifier} {simple_name}"
    index = _find(text, class_marker)
    if index is None:
        return None
    return index + len(class_marker)


def extract_delimited_text(text: str, tag: str, boundary_tag: str,
                           from_offset: int = 0) -> Optional[str]:
    """Extract the plain text following a tag.

    The text belongs to the current block only if boundary_tag, which marks
    the start of the next block, does not occur before tag.

    Args:
        text: Text to search
        tag: Marker opening the description
        boundary_tag: Marker opening the next block
        from_offset: Offset to start both searches from

    Returns:
        Trimmed text between the end of tag and the next '<', or None
    """
    tag_index = _find(text, tag, from_offset)
    if tag_index is None:
        return None

    boundary_index = _find(text, boundary_tag, from_offset)
    if boundary_index is not None and boundary_index < tag_index:
        return None

    start = tag_index + len(tag)
    end = _find(text, MARKERS.TEXT_BOUNDARY, start)
    if end is None:
        return None
    return text[start:end].strip()


def _signature_matches(signature: str, param_count: int) -> bool:
    if not signature:
        return param_count == 0
    # Naive split: generic arguments such as Map<String, Integer> are over-counted
    return len(signature.split(MARKERS.PARAMETER_SEPARATOR)) == param_count


def locate_operation_anchor(class_text: str, anchor_prefix: str,
                            method_name: str, param_count: int) -> Optional[int]:
    """Find the anchor of an operation with a given name and arity.

    Overloads sharing a name and a parameter count cannot be told apart; the
    first anchor in the page wins.

    Args:
        class_text: JavaDoc page text
        anchor_prefix: Dialect anchor prefix, e.g. '<a name="'
        method_name: Operation method name
        param_count: Number of declared parameters

    Returns:
        Offset of the first matching anchor marker, or None
    """
    operation_marker = f"{anchor_prefix}{method_name}{MARKERS.SIGNATURE_OPEN}"
    index = _find(class_text, operation_marker)
    while index is not None:
        signature_start = index + len(operation_marker)
        signature_end = _find(class_text, MARKERS.SIGNATURE_CLOSE, signature_start)
        if signature_end is None:
            return None
        if _signature_matches(class_text[signature_start:signature_end], param_count):
            return index
        index = _find(class_text, operation_marker, signature_start)
    return None


def extract_parameter_docs(section_text: str, code_close_tag: str) -> List[str]:
    """Extract parameter descriptions in the order they appear.

    Each description is the text between a closing code tag and the next
    '<' (or the end of the text), with one leading '-' removed.

    Args:
        section_text: Text of the "Parameters:" section
        code_close_tag: Dialect closing code tag

    Returns:
        Descriptions in source order
    """
    params = []
    code_index = _find(section_text, code_close_tag)
    while code_index is not None:
        start = code_index + len(code_close_tag)
        next_index = _find(section_text, MARKERS.TEXT_BOUNDARY, start)
        if next_index is None:
            next_index = len(section_text)

        param = section_text[start:next_index].strip()
        if param.startswith(MARKERS.PARAMETER_DASH):
            param = param[len(MARKERS.PARAMETER_DASH):].strip()
        params.append(param)

        if next_index == len(section_text):
            break
        code_index = _find(section_text, code_close_tag, next_index + 1)
    return params


def extract_return_doc(section_text: str, returns_marker: str, response_tag: str,
                       boundary_tag: str, search_from: int = 0) -> Optional[str]:
    """Extract the return value description of an operation.

    Args:
        section_text: Text starting at the operation's anchor
        returns_marker: Label preceding the description, normally "Returns:"
        response_tag: Dialect tag opening the description
        boundary_tag: Anchor prefix of the next operation
        search_from: Offset to look for returns_marker from

    Returns:
        Return description, or None if the section has none or it belongs to
        a later operation
    """
    returns_index = _find(section_text, returns_marker, search_from)
    if returns_index is None:
        return None
    next_operation = _find(section_text, boundary_tag)
    if next_operation is not None and next_operation < returns_index:
        return None
    return extract_delimited_text(
        section_text, response_tag, boundary_tag, returns_index + len(returns_marker)
    )


def extract_parameter_section(section_text: str, boundary_tag: str) -> Optional[str]:
    """Cut out the "Parameters:" section of an operation.

    Args:
        section_text: Text starting at the operation's anchor
        boundary_tag: Anchor prefix of the next operation

    Returns:
        Text from "Parameters:" up to "Returns:" or the end, or None when the
        operation has no parameters section of its own
    """
    param_index = _find(section_text, MARKERS.PARAMETERS)
    if param_index is None:
        return None
    next_operation = _find(section_text, boundary_tag)
    if next_operation is not None and next_operation < param_index:
        return None
    returns_index = _find(section_text, MARKERS.RETURNS, param_index)
    if returns_index is None:
        return section_text[param_index:]
    return section_text[param_index:returns_index]


class JavaDocExtractor:
    """Builds documentation bundles from JavaDoc pages written in one dialect."""

    def __init__(self, dialect: TagDialect):
        """Initialize the extractor.

        Args:
            dialect: Marker set the pages were generated with
        """
        self.dialect = dialect
        logger.debug(f"Initialized JavaDoc extractor with {dialect.name} dialect")

    def build_class_documentation(self, raw_text: str, simple_name: str,
                                  is_interface: bool) -> Optional[ClassDocumentation]:
        """Build the class bundle for a page.

        Args:
            raw_text: JavaDoc page text
            simple_name: Unqualified name of the documented type
            is_interface: Whether the documented type is an interface

        Returns:
            ClassDocumentation, or None if the page has no heading for the type
        """
        block_end = locate_class_block(raw_text, simple_name, is_interface)
        if block_end is None:
            logger.debug(f"No class block for {simple_name}")
            return None

        summary = extract_delimited_text(
            raw_text, self.dialect.class_info_tag, MARKERS.METHOD_SUMMARY, block_end
        )
        return ClassDocumentation(raw_text=raw_text, summary=summary)

    def build_method_documentation(self, class_text: str,
                                   key: OperationKey) -> Optional[MethodDocumentation]:
        """Build the bundle for one operation of a page.

        Parameter and return descriptions are only looked for when the
        operation has a description of its own.

        Args:
            class_text: JavaDoc page text
            key: Operation to document

        Returns:
            MethodDocumentation, or None if no anchor matches the operation
        """
        operation_link = self.dialect.operation_link
        anchor = locate_operation_anchor(class_text, operation_link, key.name, key.arity)
        if anchor is None:
            logger.debug(f"No anchor for operation {key}")
            return None

        marker_length = len(operation_link) + len(key.name) + len(MARKERS.SIGNATURE_OPEN)
        section = class_text[anchor + marker_length:]

        summary = extract_delimited_text(
            section, self.dialect.operation_info_tag, operation_link
        )
        if not summary:
            return MethodDocumentation(summary=summary)

        return_doc = extract_return_doc(
            section,
            MARKERS.RETURNS,
            self.dialect.response_marker,
            operation_link,
            search_from=len(operation_link),
        )

        param_docs: List[str] = []
        param_section = extract_parameter_section(section, operation_link)
        if param_section is not None:
            param_docs = extract_parameter_docs(param_section, self.dialect.code_tag)

        return MethodDocumentation(
            summary=summary,
            parameter_docs=tuple(param_docs),
            return_doc=return_doc,
        )
