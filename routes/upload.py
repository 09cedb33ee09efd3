"""
Image Upload Routes

/upload          POST {imageData, folder?} -> {imageUrl, publicId, width, height}
/uploads/<path>  GET locally stored images (only used without Cloudinary)
"""

from flask import Blueprint, current_app, send_from_directory, url_for

from constants.validation import MAX_LENGTHS
from services import get_image_host
from utils.auth import current_user_id, require_auth
from utils.errors import ValidationError
from utils.image_handler import decode_base64_image, validate_and_process_image
from utils.params import is_blank, json_body

upload_bp = Blueprint('upload', __name__, url_prefix='/upload')
upload_bp.before_request(require_auth)

uploads_bp = Blueprint('uploads', __name__, url_prefix='/uploads')


def _local_url(filename):
    return url_for('uploads.serve_upload', filename=filename, _external=True)


@upload_bp.route('', methods=['POST'])
def upload_image():
    body = json_body()
    image_data = body.get('imageData')
    if is_blank(image_data) or not isinstance(image_data, str):
        raise ValidationError("Image data is required")

    # Decode, verify and re-encode before anything leaves the server
    image = validate_and_process_image(decode_base64_image(image_data))

    folder = body.get('folder') if isinstance(body.get('folder'), str) else None
    if folder and len(folder) > MAX_LENGTHS['folder']:
        raise ValidationError(f"Folder must be at most {MAX_LENGTHS['folder']} characters")
    folder = folder or f"recipe-app/{current_user_id()}"

    host = get_image_host(current_app.config, _local_url)
    result = host.upload(image, folder)
    current_app.logger.info("Uploaded image %s (%dx%d)", result.public_id, result.width, result.height)

    return {
        'imageUrl': result.url,
        'publicId': result.public_id,
        'width': result.width,
        'height': result.height,
    }, 200


@uploads_bp.route('/<path:filename>', methods=['GET'])
def serve_upload(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
