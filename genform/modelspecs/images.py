"""Image generation models.

Image models price per submission with a flat ``FixedCost`` and serve up to
three tabs: plain text-to-image, image-reference (prompt plus up to three
reference images) and restyle (style prompt applied to an original image).
"""

from __future__ import annotations

from genform.modelspecs import presets as p
from genform.modelspecs.base import (
    Capabilities,
    FieldConfiguration,
    FieldOption,
    FileConfig,
    FixedCost,
    ModelDescriptor,
    NumberConfig,
    SelectConfig,
    SliderConfig,
    TextConfig,
    ToggleConfig,
)


TEXT_ONLY = ('text-to-image',)
WITH_REFERENCE = ('text-to-image', 'image-reference')
ALL_IMAGE_TABS = ('text-to-image', 'image-reference', 'restyle')

_NUM_IMAGES = SelectConfig(choices=('1', '2', '3', '4'), default=1, label='Number of Images')
_IMAGE_SIZES = SelectConfig(
    choices=(
        ('square_hd', 'Square HD'),
        ('portrait_4_3', 'Portrait (3:4)'),
        ('portrait_16_9', 'Portrait (9:16)'),
        ('landscape_4_3', 'Landscape (4:3)'),
        ('landscape_16_9', 'Landscape (16:9)'),
    ),
    default='square_hd',
    label='Image Size',
)
_OUTPUT_FORMAT = SelectConfig(choices=('jpeg', 'png', 'webp'), default='png', label='Output Format')
_NEGATIVE_PROMPT = TextConfig(
    default='',
    label='Negative Prompt',
    multiline=True,
    placeholder="Describe what you don't want in the image...",
)
_SEED = NumberConfig(label='Seed', min=0, max=999999999, help_text='Random seed. Set for reproducible generation')
_HIDDEN_SAFETY = ToggleConfig(default=False, label='Enable safety checker', user_selectable=False, hidden=True)
_REFERENCE_IMAGES = FileConfig(multiple=True, label='Reference Images', max_files=3)
_ORIGINAL_IMAGE = FileConfig(label='Original Image')
_STYLE_PROMPT = TextConfig(multiline=True, label='Style Prompt', placeholder='e.g. watercolor, soft pastel palette')

_FLUX_RATIOS = ('1:1', '16:9', '21:9', '3:2', '2:3', '4:5', '5:4', '3:4', '4:3', '9:16', '9:21')
_WIDE_RATIOS = (
    p.AUTO_RATIO,
    FieldOption('21:9', 'Ultra Wide (21:9)'),
    FieldOption('16:9', 'Wide (16:9)'),
    FieldOption('3:2', 'Landscape (3:2)'),
    FieldOption('4:3', 'Landscape (4:3)'),
    FieldOption('1:1', 'Square (1:1)'),
    FieldOption('3:4', 'Portrait (3:4)'),
    FieldOption('9:16', 'Portrait (9:16)'),
)


def _ratios(options, default='1:1') -> SelectConfig:
    return SelectConfig(choices=tuple(options), default=default, label='Aspect Ratio')


def _image_model(id, name, endpoint, provider, amount, description, fields, options=None, tabs=TEXT_ONLY, **extra):
    return ModelDescriptor(
        id=id,
        display_name=name,
        endpoint=endpoint,
        media='image',
        tabs=tabs,
        provider=provider,
        description=description,
        cost=FixedCost(amount),
        fields=fields,
        field_options=options or {},
        **extra,
    )


FLUX_1_1_PRO = _image_model(
    'flux-1-1-pro',
    'FLUX1.1 [pro]',
    'fal-ai/flux-pro/v1.1',
    'Black Forest Labs',
    '0.04',
    'Updated pro version with improved detail and consistency',
    ('prompt', 'image_size', 'num_images', 'output_format', 'seed', 'enable_safety_checker'),
    {
        'image_size': _IMAGE_SIZES,
        'num_images': _NUM_IMAGES,
        'output_format': _OUTPUT_FORMAT,
        'seed': _SEED,
        'enable_safety_checker': _HIDDEN_SAFETY,
    },
    categories=('recommended', 'flux'),
)

FLUX_DEV = _image_model(
    'flux-dev',
    'FLUX.1 [dev]',
    'fal-ai/flux/dev',
    'Black Forest Labs',
    '0.025',
    'Open-weight FLUX model with guidance and step control',
    ('prompt', 'aspect_ratio', 'num_images', 'guidance', 'steps', 'seed', 'output_format'),
    {
        'aspect_ratio': _ratios(_FLUX_RATIOS),
        'num_images': _NUM_IMAGES,
        'guidance': SliderConfig(
            default=3.5,
            label='Guidance Scale',
            min=0,
            max=10,
            step=0.5,
            backend_key='guidance_scale',
        ),
        'steps': NumberConfig(default=28, label='Inference Steps', min=1, max=50, backend_key='num_inference_steps'),
        'seed': _SEED,
        'output_format': SelectConfig(choices=('webp', 'jpg', 'png'), default='jpg', label='Output Format'),
    },
    categories=('flux',),
)

FLUX_PRO_KONTEXT = _image_model(
    'flux-pro-kontext',
    'FLUX.1 Kontext [pro]',
    'fal-ai/flux-pro/kontext/text-to-image',
    'Black Forest Labs',
    '0.04',
    'Enhanced FLUX model with improved context awareness for better image coherence',
    ('prompt', 'reference_images', 'aspect_ratio', 'num_images', 'guidance', 'seed'),
    {
        'reference_images': _REFERENCE_IMAGES,
        'aspect_ratio': _ratios(_FLUX_RATIOS),
        'num_images': _NUM_IMAGES,
        'guidance': SliderConfig(default=3.5, label='Guidance Scale', min=1, max=20, backend_key='guidance_scale'),
        'seed': _SEED,
    },
    tabs=WITH_REFERENCE,
    categories=('flux',),
)

FLUX_PRO_KONTEXT_MAX = _image_model(
    'flux-pro-kontext-max',
    'FLUX.1 Kontext [max]',
    'fal-ai/flux-pro/kontext/max/text-to-image',
    'Black Forest Labs',
    '0.08',
    'Maximum quality FLUX model with enhanced context awareness and detail preservation',
    ('prompt', 'reference_images', 'aspect_ratio', 'num_images', 'seed'),
    {
        'reference_images': _REFERENCE_IMAGES,
        'aspect_ratio': _ratios(_FLUX_RATIOS),
        'num_images': _NUM_IMAGES,
        'seed': _SEED,
    },
    tabs=WITH_REFERENCE,
    categories=('flux',),
)

IDEOGRAM_V3 = _image_model(
    'ideogram-v3',
    'Ideogram V3',
    'fal-ai/ideogram/v3',
    'Ideogram',
    '0.09',
    'Professional model specializing in realistic and artistic compositions',
    ('prompt', 'negative_prompt', 'rendering_speed', 'style', 'expand_prompt', 'image_size', 'num_images', 'seed'),
    {
        'negative_prompt': _NEGATIVE_PROMPT,
        'rendering_speed': SelectConfig(
            choices=('TURBO', 'BALANCED', 'QUALITY'),
            default='QUALITY',
            label='Rendering Speed',
        ),
        'style': SelectConfig(choices=('AUTO', 'GENERAL', 'REALISTIC', 'DESIGN'), default='AUTO', label='Style'),
        'expand_prompt': ToggleConfig(default=True, label='Use MagicPrompt to enhance the input prompt'),
        'image_size': _IMAGE_SIZES,
        'num_images': _NUM_IMAGES,
        'seed': _SEED,
    },
    categories=('recommended', 'ideogram'),
)

RECRAFT_V3 = _image_model(
    'recraft-v3',
    'Recraft V3',
    'fal-ai/recraft/v3/text-to-image',
    'Recraft',
    '0.04',
    'Vector-friendly model with strong typography and brand styles',
    ('prompt', 'image_size', 'style'),
    {
        'image_size': _IMAGE_SIZES,
        'style': SelectConfig(
            choices=('realistic_image', 'digital_illustration', 'vector_illustration'),
            default='realistic_image',
            label='Style',
        ),
    },
    categories=('recraft',),
)

IMAGEN_4 = _image_model(
    'imagen-4',
    'Imagen 4 Ultra',
    'fal-ai/imagen4/preview/ultra',
    'Google',
    '0.06',
    "Google's highest quality image generation model",
    ('prompt', 'negative_prompt', 'aspect_ratio', 'num_images', 'seed'),
    {
        'negative_prompt': _NEGATIVE_PROMPT,
        'aspect_ratio': _ratios(('1:1', '16:9', '9:16', '3:4', '4:3')),
        'num_images': _NUM_IMAGES,
        'seed': _SEED,
    },
    categories=('google',),
)

SEEDREAM_V4 = _image_model(
    'seedream-v4',
    'Seedream 4.0',
    'fal-ai/bytedance/seedream/v4/text-to-image',
    'ByteDance',
    '0.03',
    "ByteDance's new-generation image creation model integrating generation and editing capabilities",
    ('prompt', 'reference_images', 'image_size', 'num_images', 'seed', 'enable_safety_checker'),
    {
        'reference_images': _REFERENCE_IMAGES,
        'image_size': _IMAGE_SIZES,
        'num_images': _NUM_IMAGES,
        'seed': _SEED,
        'enable_safety_checker': _HIDDEN_SAFETY,
    },
    tabs=WITH_REFERENCE,
    categories=('recommended', 'bytedance'),
)

QWEN_IMAGE = _image_model(
    'qwen-image',
    'Qwen Image',
    'fal-ai/qwen-image',
    'Alibaba',
    '0.02',
    'Image generation foundation model with strong complex text rendering and precise editing',
    ('prompt', 'negative_prompt', 'image_size', 'num_images', 'guidance', 'steps', 'seed'),
    {
        'negative_prompt': _NEGATIVE_PROMPT,
        'image_size': _IMAGE_SIZES,
        'num_images': _NUM_IMAGES,
        'guidance': SliderConfig(default=2.5, label='Guidance Scale', min=0, max=20, backend_key='guidance_scale'),
        'steps': NumberConfig(default=30, label='Inference Steps', min=2, max=250, backend_key='num_inference_steps'),
        'seed': _SEED,
    },
    categories=('qwen',),
)

HUNYUAN_V3 = _image_model(
    'hunyuan-v3',
    'Hunyuan Image 3.0',
    'fal-ai/hunyuan-image/v3/text-to-image',
    'Tencent',
    '0.1',
    "Tencent's Hunyuan Image 3.0 with state-of-the-art visual content generation capabilities",
    ('prompt', 'negative_prompt', 'image_size', 'num_images', 'seed'),
    {
        'negative_prompt': _NEGATIVE_PROMPT,
        'image_size': _IMAGE_SIZES,
        'num_images': _NUM_IMAGES,
        'seed': _SEED,
    },
    categories=('tencent',),
)

# Exposes the UI-side names ``quantity`` and ``output_quality``; both are renamed
# to the backend's ``num_images`` / ``quality`` when the payload is built.
GPT_IMAGE_1 = _image_model(
    'gpt-image-1',
    'GPT Image 1',
    'fal-ai/gpt-image-1/text-to-image',
    'OpenAI',
    '0.05',
    "OpenAI's multimodal image model with strong instruction following",
    ('prompt', 'reference_images', 'style_prompt', 'original_image', 'quantity', 'output_quality', 'size', 'background'),
    {
        'reference_images': _REFERENCE_IMAGES,
        'style_prompt': _STYLE_PROMPT,
        'original_image': _ORIGINAL_IMAGE,
        'quantity': SelectConfig(choices=('1', '2', '3', '4'), default=1, label='Number of Images'),
        'output_quality': SelectConfig(choices=('low', 'medium', 'high'), default='medium', label='Quality'),
        'size': SelectConfig(choices=('auto', '1024x1024', '1536x1024', '1024x1536'), default='auto', label='Size'),
        'background': SelectConfig(choices=('auto', 'transparent', 'opaque'), default='auto', label='Background'),
    },
    tabs=ALL_IMAGE_TABS,
    categories=('recommended', 'openai'),
    capabilities=Capabilities(prompt_character_limit=4000),
)

GEMINI_25_FLASH_IMAGE = _image_model(
    'gemini-25-flash-image',
    'Nano Banana',
    'fal-ai/gemini-25-flash-image',
    'Google',
    '0.039',
    "Google's state-of-the-art image generation and editing model",
    ('prompt', 'reference_images', 'style_prompt', 'original_image', 'num_images', 'output_format'),
    {
        'reference_images': _REFERENCE_IMAGES,
        'style_prompt': _STYLE_PROMPT,
        'original_image': _ORIGINAL_IMAGE,
        'num_images': _NUM_IMAGES,
        'output_format': _OUTPUT_FORMAT,
    },
    tabs=ALL_IMAGE_TABS,
    categories=('recommended', 'google'),
)

NANO_BANANA_PRO = _image_model(
    'nano-banana-pro',
    'Nano Banana Pro',
    'fal-ai/nano-banana-pro',
    'Google',
    '0.15',
    "Google's latest state-of-the-art image generation and editing model with exceptional realism and typography",
    (
        'prompt',
        'reference_images',
        'style_prompt',
        'original_image',
        'num_images',
        'aspect_ratio',
        'output_format',
        'resolution',
        'sync_mode',
    ),
    {
        'reference_images': _REFERENCE_IMAGES,
        'style_prompt': _STYLE_PROMPT,
        'original_image': _ORIGINAL_IMAGE,
        'num_images': _NUM_IMAGES,
        'aspect_ratio': _ratios(_WIDE_RATIOS),
        'output_format': _OUTPUT_FORMAT,
        'resolution': SelectConfig(choices=('1K', '2K', '4K'), default='1K', label='Resolution'),
        'sync_mode': FieldConfiguration(default=False, label='Sync Mode', user_selectable=False, hidden=True),
    },
    tabs=ALL_IMAGE_TABS,
    categories=('recommended', 'google'),
    capabilities=Capabilities(prompt_character_limit=5000),
)

MODELS = (
    FLUX_1_1_PRO,
    FLUX_DEV,
    FLUX_PRO_KONTEXT,
    FLUX_PRO_KONTEXT_MAX,
    IDEOGRAM_V3,
    RECRAFT_V3,
    IMAGEN_4,
    SEEDREAM_V4,
    QWEN_IMAGE,
    HUNYUAN_V3,
    GPT_IMAGE_1,
    GEMINI_25_FLASH_IMAGE,
    NANO_BANANA_PRO,
)
