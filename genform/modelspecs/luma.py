from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FixedCost, ModelDescriptor, PerSecondCost


_LUMA_RATIOS = p.aspect_ratio(
    (
        p.LANDSCAPE,
        p.PORTRAIT,
        p.STANDARD_4_3,
        p.PORTRAIT_3_4,
        p.ULTRAWIDE,
        p.VERTICAL,
    )
)
_REALISM = 'Ultra-realistic detail and fast, coherent scene motion.'


LUMA = ModelDescriptor(
    id='LUMA',
    display_name='Luma Dream Machine',
    endpoint='fal-ai/luma-dream-machine',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Luma',
    description='High-quality text-to-video generation by Luma Labs.',
    features=('Loop',),
    categories=('luma',),
    cost=FixedCost('0.5'),
    fields=('prompt', 'aspectRatio', 'loop', 'addAudioToVideo'),
    field_options={'aspectRatio': _LUMA_RATIOS, 'loop': p.LOOP, 'addAudioToVideo': p.ADD_AUDIO},
)

LUMA_RAY2 = ModelDescriptor(
    id='LUMA_RAY2',
    display_name='Luma Ray 2',
    endpoint='fal-ai/luma-dream-machine/ray-2',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Luma',
    description=_REALISM,
    categories=('recommended', 'luma'),
    cost=FixedCost('1'),
    fields=('prompt', 'addAudioToVideo'),
    field_options={'addAudioToVideo': p.ADD_AUDIO},
)

LUMA_IMAGE = ModelDescriptor(
    id='LUMA_IMAGE',
    display_name='Luma Dream Machine (Image)',
    endpoint='fal-ai/luma-dream-machine/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Luma',
    description='Animate static images using Luma Dream Machine.',
    features=('Loop', 'End Frame'),
    categories=('luma',),
    cost=FixedCost('0.5'),
    fields=('prompt', 'imageBase64', 'aspectRatio', 'endFrameImageBase64', 'loop', 'addAudioToVideo'),
    field_options={'aspectRatio': _LUMA_RATIOS, 'loop': p.LOOP, 'addAudioToVideo': p.ADD_AUDIO},
    capabilities=Capabilities(supports_end_frame=True),
)

LUMA_RAY2_IMAGE = ModelDescriptor(
    id='LUMA_RAY2_IMAGE',
    display_name='Luma Ray 2 (Image)',
    endpoint='fal-ai/luma-dream-machine/ray-2/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Luma',
    description=_REALISM,
    features=('End Frame',),
    categories=('recommended', 'luma'),
    cost=PerSecondCost('0.2'),
    fields=('prompt', 'imageBase64', 'endFrameImageBase64', 'addAudioToVideo'),
    field_options={'addAudioToVideo': p.ADD_AUDIO},
    capabilities=Capabilities(supports_end_frame=True),
)

MODELS = (LUMA, LUMA_RAY2, LUMA_IMAGE, LUMA_RAY2_IMAGE)
