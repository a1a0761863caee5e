from zpl_emulator.contracts.errors import (
    ConfigLoadError,
    EmptyPayloadError,
    LabelPipelineError,
    RenderServiceError,
    WriteError,
)
from zpl_emulator.contracts.label_contract import (
    ConfigurationOverride,
    LabelConfiguration,
    LabelFormat,
)

__all__ = [
    "ConfigLoadError",
    "ConfigurationOverride",
    "EmptyPayloadError",
    "LabelConfiguration",
    "LabelFormat",
    "LabelPipelineError",
    "RenderServiceError",
    "WriteError",
]
