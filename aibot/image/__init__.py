"""Image generation adapter package.

Scope:
    Provides the Stability AI text-to-image client and the service used by
    `/ai image` command handling: prompt translation, style enhancement,
    payload construction and Base64 artifact decoding.

Non-goals:
    - No file ingestion or image-to-image editing.
    - No temporary files; images are returned as in-memory PNG bytes.
"""
