"""
Render boundary: Surface protocol and the recorded command form.
"""

from .surface import (
    Surface,
    FIRST_SCROBBLE_LABEL,
    LAST_SCROBBLE_LABEL,
    SELECTED_SCROBBLE_LABEL,
)
from .commands import (
    CommandList,
    RecordingSurface,
    CmdClear,
    CmdDrawPoint,
    CmdDrawTimeAxis,
    CmdTimeLabel,
    CmdClearTimeLabel,
    CmdLabel,
    CmdRemoveLabels,
    CmdLegendGenre,
    CmdIntro,
    CmdScrobbleInfo,
)

__all__ = [
    'Surface', 'FIRST_SCROBBLE_LABEL', 'LAST_SCROBBLE_LABEL', 'SELECTED_SCROBBLE_LABEL',
    'CommandList', 'RecordingSurface',
    'CmdClear', 'CmdDrawPoint', 'CmdDrawTimeAxis', 'CmdTimeLabel', 'CmdClearTimeLabel',
    'CmdLabel', 'CmdRemoveLabels', 'CmdLegendGenre', 'CmdIntro', 'CmdScrobbleInfo',
]
