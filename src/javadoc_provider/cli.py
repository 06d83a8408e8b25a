"""Command-line interface for the javadoc-provider tool."""

import json
import sys
from typing import Any, Dict, List, Optional

from javadoc_provider.config import APP, DEFAULTS, parse_arguments
from javadoc_provider.errors import JavaDocProviderError
from javadoc_provider.extractors import JavaDescriptorExtractor
from javadoc_provider.provider import JavaDocProvider
from javadoc_provider.utils import Logger, get_logger
from javadoc_provider.utils.config_loader import ConfigLoader


def build_report(provider: JavaDocProvider, extractor: JavaDescriptorExtractor,
                 class_name: str) -> Dict[str, Any]:
    """Collect the documentation of a resource class and its operations."""
    class_descriptor = extractor.get_class_descriptor(class_name)
    operations = []
    for operation in extractor.get_operation_descriptors(class_name):
        key = operation.operation_key
        operations.append({
            'operation': str(operation.method),
            'summary': provider.get_method_doc(operation),
            'parameters': [
                provider.get_method_parameter_doc(operation, index)
                for index in range(key.arity)
            ],
            'returns': provider.get_method_response_doc(operation),
        })

    return {
        'class': class_descriptor.service_type.qualified_name,
        'summary': provider.get_class_doc(class_descriptor),
        'generator_version': provider.generator_version,
        'dialect': provider.dialect.name,
        'operations': operations,
    }


def format_report(report: Dict[str, Any]) -> str:
    """Render a report as indented text."""
    lines = [
        f"{report['class']} ({report['dialect']} javadoc, version {report['generator_version']})",
        f"  {report['summary'] or '<no documentation>'}",
    ]
    for operation in report['operations']:
        lines.append("")
        lines.append(f"  {operation['operation']}")
        lines.append(f"    {operation['summary'] or '<no documentation>'}")
        for index, doc in enumerate(operation['parameters']):
            lines.append(f"    param {index}: {doc or '<no documentation>'}")
        if operation['returns']:
            lines.append(f"    returns: {operation['returns']}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_arguments(argv)
    logger = get_logger("cli")

    try:
        config = ConfigLoader(args.config) if args.config else None
    except JavaDocProviderError as e:
        Logger.configure(level=args.log_level or DEFAULTS.LOG_LEVEL)
        logger.error(e.message)
        return APP.EXIT_FAILURE

    Logger.configure(level=args.log_level or (config.get_log_level() if config else DEFAULTS.LOG_LEVEL))

    try:
        docs_location = args.docs or (config.get_docs_location() if config else None)
        generator_version = args.generator_version or (
            config.get_generator_version() if config else None
        )
        provider = JavaDocProvider.from_location(
            docs_location,
            generator_version=generator_version,
            timeout=config.get_http_timeout() if config else DEFAULTS.HTTP_TIMEOUT,
            encoding=config.get_encoding() if config else DEFAULTS.ENCODING,
        )

        extractor = JavaDescriptorExtractor()
        for source in args.source:
            extractor.add_file(source)

        class_name = args.class_name or (extractor.type_names[0] if extractor.type_names else None)
        if class_name is None:
            logger.error("No class or interface found in the given sources")
            return APP.EXIT_FAILURE

        report = build_report(provider, extractor, class_name)
    except JavaDocProviderError as e:
        logger.error(e.message)
        for suggestion in e.suggestions:
            logger.info(f"  hint: {suggestion}")
        return APP.EXIT_FAILURE

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(format_report(report))
    return APP.EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
