from dependency_injector import containers, providers

from ..configuration.config import Config
from ..processors.openapi import (
    APIComponentsFilter,
    APIDefinitionLoader,
    APIDefinitionValidator,
    DeprecatedPathsFilter,
    FieldReducer,
    OpenAPIMinifier,
    ReferenceResolver,
)
from ..processors.openapi.components_extraction_strategies import (
    CommonResponseExtractor,
    CommonSchemaExtractor,
)
from ..processors.openapi_processor import OpenAPIProcessor
from ..services.file_service import FileService


class ProcessorsAdapter(containers.DeclarativeContainer):
    """Adapter for processor components."""

    config = providers.Dependency(instance_of=Config)

    file_service = providers.Factory(FileService)
    api_definition_loader = providers.Factory(APIDefinitionLoader, file_service=file_service)
    api_definition_validator = providers.Factory(APIDefinitionValidator)

    reference_resolver = providers.Factory(ReferenceResolver)
    deprecated_paths_filter = providers.Factory(DeprecatedPathsFilter)
    response_extractor = providers.Factory(CommonResponseExtractor)
    schema_extractor = providers.Factory(CommonSchemaExtractor)
    field_reducer = providers.Factory(FieldReducer)
    components_filter = providers.Factory(APIComponentsFilter, reference_resolver=reference_resolver)

    minifier = providers.Factory(
        OpenAPIMinifier,
        deprecated_paths_filter=deprecated_paths_filter,
        response_extractor=response_extractor,
        schema_extractor=schema_extractor,
        field_reducer=field_reducer,
        components_filter=components_filter,
    )

    openapi_processor = providers.Factory(
        OpenAPIProcessor,
        config=config,
        file_service=file_service,
        minifier=minifier,
        api_definition_loader=api_definition_loader,
        validator=api_definition_validator,
    )
