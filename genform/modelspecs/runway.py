from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import Capabilities, FieldOption, ModelDescriptor, PerSecondCost


GEN4_TURBO = ModelDescriptor(
    id='GEN4_TURBO',
    display_name='Gen 4 Turbo',
    endpoint='gen4_turbo',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='RunwayML',
    description="Fast and efficient video generation with RunwayML's Gen 4 Turbo model.",
    features=('Adv Aspect Ratios', 'Fast Generation'),
    categories=('runwayml', 'recommended'),
    cost=PerSecondCost('0.05'),
    fields=('prompt', 'imageBase64', 'duration', 'aspectRatio'),
    field_options={
        'duration': p.duration(p.FIVE_OR_TEN, '5'),
        'aspectRatio': p.aspect_ratio(
            (
                FieldOption('1280:720', 'HD (1280:720)'),
                FieldOption('720:1280', 'HD Portrait (720:1280)'),
                '1104:832',
                '832:1104',
                FieldOption('960:960', 'Square (960:960)'),
                FieldOption('1584:672', 'Ultra Wide (1584:672)'),
            ),
            default='1280:720',
        ),
    },
    capabilities=Capabilities(prompt_character_limit=1000, negative_prompt_character_limit=1000),
)

GEN3A_TURBO = ModelDescriptor(
    id='GEN3A_TURBO',
    display_name='Gen 3A Turbo',
    endpoint='gen3a_turbo',
    media='video',
    tabs=p.VIDEO_TABS_IMAGE,
    provider='RunwayML',
    description=(
        "Advanced video generation with RunwayML's Gen 3A Turbo model featuring "
        'high-quality output and fast processing.'
    ),
    features=('End Frame',),
    categories=('runwayml',),
    cost=PerSecondCost('0.05'),
    fields=('prompt', 'imageBase64', 'endFrameImageBase64', 'duration', 'aspectRatio'),
    field_options={
        'duration': p.duration(p.FIVE_OR_TEN, '5'),
        'aspectRatio': p.aspect_ratio(('1280:768', '768:1280'), default='1280:768'),
    },
    capabilities=Capabilities(
        supports_end_frame=True,
        prompt_character_limit=1000,
        negative_prompt_character_limit=1000,
    ),
)

MODELS = (GEN4_TURBO, GEN3A_TURBO)
