"""
Image Hosting Service

Stores validated JPEG images either on Cloudinary (signed upload over its
REST API) or, when no Cloudinary credentials are configured, in the local
upload folder served by the app.
"""

import hashlib
import logging
import os
import time
import uuid
from collections import namedtuple

import requests
from werkzeug.utils import secure_filename

from utils.errors import ImageUploadError

logger = logging.getLogger(__name__)

CLOUDINARY_UPLOAD_URL = 'https://api.cloudinary.com/v1_1/{cloud_name}/image/upload'

UploadResult = namedtuple('UploadResult', ['url', 'public_id', 'width', 'height'])


def clean_folder(folder):
    """Reduce a client-supplied folder to safe path segments."""
    segments = [secure_filename(part) for part in str(folder or '').split('/')]
    return '/'.join(part for part in segments if part)


def cloudinary_signature(params, api_secret):
    """
    Cloudinary request signature: SHA-1 of the sorted 'key=value' pairs
    joined with '&', followed by the API secret.
    """
    to_sign = '&'.join(f'{key}={params[key]}' for key in sorted(params) if params[key] not in (None, ''))
    return hashlib.sha1((to_sign + api_secret).encode('utf-8')).hexdigest()


class CloudinaryHost:
    """Signed uploads to Cloudinary."""

    def __init__(self, cloud_name, api_key, api_secret, timeout=30):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout

    def upload(self, image, folder):
        params = {'folder': clean_folder(folder), 'timestamp': int(time.time())}
        data = dict(params)
        data['api_key'] = self.api_key
        data['signature'] = cloudinary_signature(params, self.api_secret)

        files = {'file': ('upload.jpg', image.data, 'image/jpeg')}
        url = CLOUDINARY_UPLOAD_URL.format(cloud_name=self.cloud_name)

        try:
            response = requests.post(url, data=data, files=files, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ImageUploadError(f"Image host request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            error = body.get('error') if isinstance(body, dict) else None
            message = error.get('message') if isinstance(error, dict) else response.text[:200]
            raise ImageUploadError(f"Image host responded with {response.status_code}: {message}")

        return UploadResult(
            url=body.get('secure_url') or body.get('url'),
            public_id=body.get('public_id'),
            width=body.get('width', image.width),
            height=body.get('height', image.height),
        )


class LocalHost:
    """Writes images under the app's upload folder."""

    def __init__(self, upload_folder, url_builder):
        self.upload_folder = upload_folder
        self.url_builder = url_builder

    def upload(self, image, folder):
        folder = clean_folder(folder)
        public_id = f"{folder}/{uuid.uuid4().hex}" if folder else uuid.uuid4().hex
        path = os.path.join(self.upload_folder, *public_id.split('/')) + '.jpg'

        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'wb') as fh:
                fh.write(image.data)
        except OSError as exc:
            raise ImageUploadError(f"Could not store image: {exc}") from exc

        return UploadResult(
            url=self.url_builder(public_id + '.jpg'),
            public_id=public_id,
            width=image.width,
            height=image.height,
        )


def get_image_host(config, url_builder):
    """Cloudinary when fully configured, local storage otherwise."""
    if config.get('CLOUDINARY_CLOUD_NAME') and config.get('CLOUDINARY_API_KEY') and config.get('CLOUDINARY_API_SECRET'):
        return CloudinaryHost(
            config['CLOUDINARY_CLOUD_NAME'],
            config['CLOUDINARY_API_KEY'],
            config['CLOUDINARY_API_SECRET'],
            timeout=config.get('IMAGE_UPLOAD_TIMEOUT', 30),
        )
    logger.debug("Cloudinary not configured, storing uploads locally")
    return LocalHost(config['UPLOAD_FOLDER'], url_builder)
