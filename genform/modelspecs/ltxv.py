from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, CostTier, ModelDescriptor, TieredCost


_RESOLUTIONS = p.resolution((p.RES_1080, p.RES_1440, p.RES_2160), default='1080p')
_WIDESCREEN_ONLY = p.aspect_ratio((p.LANDSCAPE,), user_selectable=False)
_AUDIO = Capabilities(supports_audio_generation=True)

_NORMAL = TieredCost('0.06', (CostTier('1080p', '0.06'), CostTier('1440p', '0.12'), CostTier('2160p', '0.24')))
_FAST = TieredCost('0.04', (CostTier('1080p', '0.04'), CostTier('1440p', '0.08'), CostTier('2160p', '0.16')))
_NORMAL_DURATIONS = p.duration(('6', '8', '10'), '6')
_FAST_DURATIONS = p.duration(('6', '8', '10', '12', '14', '16', '18', '20'), '6')


def _ltxv(id, name, endpoint, tabs, cost, durations, description, fast=False, image=False) -> ModelDescriptor:
    fields = ['prompt', 'duration', 'resolution', 'aspectRatio']
    if image:
        fields.insert(1, 'imageBase64')
    features = ['Audio Generation', '2160p']
    if fast:
        features.append('Fast')
    return ModelDescriptor(
        id=id,
        display_name=name,
        endpoint=endpoint,
        media='video',
        tabs=tabs,
        provider='Lightricks',
        description=description,
        features=tuple(features),
        categories=('lightricks',),
        cost=cost,
        fields=tuple(fields),
        field_options={'duration': durations, 'aspectRatio': _WIDESCREEN_ONLY, 'resolution': _RESOLUTIONS},
        capabilities=_AUDIO,
    )


LTXV_2_TEXT = _ltxv(
    'LTXV_2_TEXT',
    'LTX Video 2.0',
    'fal-ai/ltxv-2/text-to-video',
    p.VIDEO_TABS_TEXT,
    _NORMAL,
    _NORMAL_DURATIONS,
    'Create high-fidelity video with audio from text using Lightricks LTX Video 2.0.',
)
LTXV_2_FAST_TEXT = _ltxv(
    'LTXV_2_FAST_TEXT',
    'LTX Video 2.0 Fast',
    'fal-ai/ltxv-2/text-to-video/fast',
    p.VIDEO_TABS_TEXT,
    _FAST,
    _FAST_DURATIONS,
    'Fast high-fidelity video with audio from text using Lightricks LTX Video 2.0.',
    fast=True,
)
LTXV_2_IMAGE = _ltxv(
    'LTXV_2_IMAGE',
    'LTX Video 2.0 (Image)',
    'fal-ai/ltxv-2/image-to-video',
    p.VIDEO_TABS_IMAGE,
    _NORMAL,
    _NORMAL_DURATIONS,
    'Create high-fidelity video with audio from an image using Lightricks LTX Video 2.0.',
    image=True,
)
LTXV_2_FAST_IMAGE = _ltxv(
    'LTXV_2_FAST_IMAGE',
    'LTX Video 2.0 Fast (Image)',
    'fal-ai/ltxv-2/image-to-video/fast',
    p.VIDEO_TABS_IMAGE,
    _FAST,
    _FAST_DURATIONS,
    'Fast high-fidelity video with audio from an image using Lightricks LTX Video 2.0.',
    fast=True,
    image=True,
)

MODELS = (LTXV_2_TEXT, LTXV_2_FAST_TEXT, LTXV_2_IMAGE, LTXV_2_FAST_IMAGE)
