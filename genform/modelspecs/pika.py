from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FixedCost, ModelDescriptor, PerSecondCost, SelectConfig


PIKA_EFFECT_TEXT_V22 = ModelDescriptor(
    id='PIKA_EFFECT_TEXT_V22',
    display_name='Pika v2.2',
    endpoint='fal-ai/pika/v2.2/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Pika',
    description='Smooth 1080p video generation with extended duration control and heightened realism.',
    categories=('pika',),
    cost=PerSecondCost('0.09'),
    fields=('prompt', 'negativePrompt', 'duration', 'aspectRatio'),
    field_options={
        'duration': p.duration(p.FIVE_OR_TEN, '5'),
        'aspectRatio': p.aspect_ratio(p.PIKA_RATIOS),
        'negativePrompt': p.NEGATIVE_PROMPT,
    },
)

# Flat price; the duration selector stays hidden because the clip length is fixed.
PIKA_EFFECT_TEXT_TURBO_V2 = ModelDescriptor(
    id='PIKA_EFFECT_TEXT_TURBO_V2',
    display_name='Pika Turbo V2',
    endpoint='fal-ai/pika/v2/turbo/text-to-video',
    media='video',
    tabs=p.VIDEO_TABS_TEXT,
    provider='Pika',
    description='Faster (and cheaper) version of Pika v2.2.',
    features=('Fast',),
    categories=('pika',),
    cost=FixedCost('0.2'),
    fields=('prompt', 'negativePrompt', 'duration', 'aspectRatio'),
    field_options={
        'duration': p.duration(('5',), '5', user_selectable=False),
        'aspectRatio': p.aspect_ratio(p.PIKA_RATIOS),
        'negativePrompt': p.NEGATIVE_PROMPT,
    },
    capabilities=Capabilities(fixed_duration=5),
)

PIKA_EFFECT_SCENES_V22 = ModelDescriptor(
    id='PIKA_EFFECT_SCENES_V22',
    display_name='Pika Scenes v2.2',
    endpoint='fal-ai/pika/v2.2/pikascenes',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='Pika',
    description='Generate videos from multiple scene images using Pika v2.2.',
    features=('Multi-Image Input', 'Scene Styles'),
    categories=('pika',),
    cost=PerSecondCost('0.09'),
    fields=('prompt', 'negativePrompt', 'pikaScenesIngredient', 'duration', 'aspectRatio', 'scenesImages'),
    field_options={
        'duration': p.duration(p.FIVE_OR_TEN, '5'),
        'aspectRatio': p.aspect_ratio(p.PIKA_RATIOS),
        'negativePrompt': p.NEGATIVE_PROMPT,
        'pikaScenesIngredient': SelectConfig(
            choices=(('creative', 'Creative'), ('precise', 'Precise')),
            default='creative',
            label='Mode',
            help_text='Creative mode for artistic results, Precise for accurate interpretation',
        ),
    },
)

MODELS = (PIKA_EFFECT_TEXT_V22, PIKA_EFFECT_TEXT_TURBO_V2, PIKA_EFFECT_SCENES_V22)
