from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, ModelDescriptor, PerSecondCost, TieredTemplateCost


_RATIOS = p.aspect_ratio((p.LANDSCAPE, p.PORTRAIT, p.SQUARE))


VIDU_IMAGE = ModelDescriptor(
    id='VIDU_IMAGE',
    display_name='Vidu (Image)',
    endpoint='fal-ai/vidu/image-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Vidu image-to-video generation with movement control.',
    features=('Movement Control',),
    categories=('vidu',),
    cost=PerSecondCost('0.05'),
    fields=('prompt', 'imageBase64', 'movementAmplitude'),
    field_options={'movementAmplitude': p.MOVEMENT_AMPLITUDE},
)

VIDU_REFERENCE = ModelDescriptor(
    id='VIDU_REFERENCE',
    display_name='Vidu Reference',
    endpoint='fal-ai/vidu/reference-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Generate video using reference images with Vidu.',
    features=('Multi-Image Reference', 'Movement Control'),
    categories=('vidu',),
    cost=PerSecondCost('0.1'),
    fields=('prompt', 'imageBase64', 'movementAmplitude', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS, 'movementAmplitude': p.MOVEMENT_AMPLITUDE},
)

VIDU_START_END = ModelDescriptor(
    id='VIDU_START_END',
    display_name='Vidu Start-End',
    endpoint='fal-ai/vidu/start-end-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Create video transitions between start and end images using Vidu.',
    features=('Image Transition', 'Movement Control', 'End Frame'),
    categories=('vidu',),
    cost=PerSecondCost('0.5'),
    fields=('prompt', 'imageBase64', 'movementAmplitude', 'endFrameImageBase64'),
    field_options={'movementAmplitude': p.MOVEMENT_AMPLITUDE},
    capabilities=Capabilities(supports_end_frame=True),
)

VIDU_TEMPLATE = ModelDescriptor(
    id='VIDU_TEMPLATE',
    display_name='Vidu Template',
    endpoint='fal-ai/vidu/template-to-video',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Generate videos using pre-defined templates with Vidu.',
    features=('Templates', 'Multi-Image Input'),
    categories=('vidu',),
    cost=TieredTemplateCost('0.2', '0.3', '0.5'),
    fields=('prompt', 'imageBase64', 'template', 'aspectRatio'),
    field_options={'aspectRatio': _RATIOS, 'template': p.TEMPLATE},
)

_Q2_OPTIONS = {
    'duration': p.duration(('2', '3', '4', '5', '6', '7', '8'), '5'),
    'resolution': p.resolution(('720p', '1080p')),
    'movementAmplitude': p.MOVEMENT_AMPLITUDE,
}

VIDU_Q2_TURBO = ModelDescriptor(
    id='VIDU_Q2_TURBO',
    display_name='Vidu Q2 Turbo (Image)',
    endpoint='fal-ai/vidu/q2/image-to-video/turbo',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Use the latest Vidu Q2 Turbo model with much better quality and control on your videos.',
    features=('Movement Control', '720p'),
    categories=('vidu', 'recommended'),
    cost=PerSecondCost('0.05'),
    fields=('prompt', 'imageBase64', 'duration', 'resolution', 'movementAmplitude', 'seed'),
    field_options=_Q2_OPTIONS,
)

VIDU_Q2_PRO = ModelDescriptor(
    id='VIDU_Q2_PRO',
    display_name='Vidu Q2 Pro (Image)',
    endpoint='fal-ai/vidu/q2/image-to-video/pro',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Vidu',
    description='Use the latest Vidu Q2 Pro model with much better quality and control on your videos.',
    features=('Movement Control', '1080p'),
    categories=('vidu', 'recommended'),
    cost=PerSecondCost('0.08'),
    fields=('prompt', 'imageBase64', 'duration', 'resolution', 'movementAmplitude', 'seed'),
    field_options=_Q2_OPTIONS,
)

MODELS = (VIDU_IMAGE, VIDU_REFERENCE, VIDU_START_END, VIDU_TEMPLATE, VIDU_Q2_TURBO, VIDU_Q2_PRO)
