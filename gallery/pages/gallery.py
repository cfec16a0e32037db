"""Student gallery page: lookup form, image grid and lightbox.

Self-contained HTML (inline CSS and JS, no build step). The page calls
GET {api_base}/api/images and loads thumbnails through the image proxy.
"""

import html
import json

from gallery.shared.enums import Level

PLACEHOLDER_THUMB = "https://placehold.co/400x225?text=Image+Unavailable"
PLACEHOLDER_FULL = "https://placehold.co/800x600?text=Image+Unavailable"

_STYLES = """
* { box-sizing: border-box; }
body {
    font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
    margin: 0;
    min-height: 100vh;
    background: linear-gradient(135deg, #eff6ff, #eef2ff);
    color: #1f2937;
    padding: 2rem 1rem;
}
header { max-width: 64rem; margin: 0 auto 2rem; }
.badge {
    display: inline-flex; gap: .5rem; align-items: center;
    background: #fff; padding: .5rem 1rem; border-radius: 999px;
    box-shadow: 0 2px 6px rgba(0,0,0,.08); font-weight: 600;
}
.card {
    max-width: 36rem; margin: 0 auto; background: #fff;
    border-radius: 1rem; padding: 2rem; border: 1px solid #f3f4f6;
    box-shadow: 0 20px 25px -5px rgba(0,0,0,.1);
}
.card.wide { max-width: 64rem; }
h1 { font-size: 1.75rem; margin: 0 0 .5rem; }
.subtitle { color: #6b7280; margin: 0 0 2rem; }
label { display: block; font-size: .875rem; font-weight: 500; margin-bottom: .375rem; }
label .req { color: #ef4444; }
input, select {
    width: 100%; padding: .75rem 1rem; font-size: 1rem;
    border: 1px solid #e5e7eb; border-radius: .5rem; background: #f9fafb;
}
input.invalid { border-color: #ef4444; }
.field { margin-bottom: 1.25rem; }
.field-error { color: #dc2626; font-size: .875rem; margin: .25rem 0 0; min-height: 1em; }
button.primary {
    width: 100%; margin-top: 1rem; padding: .75rem 1.5rem; border: 0;
    border-radius: .5rem; color: #fff; font-size: 1rem; font-weight: 500; cursor: pointer;
    background: linear-gradient(90deg, #2563eb, #4f46e5);
}
button.primary:disabled { opacity: .6; cursor: progress; }
.results-head { display: flex; justify-content: space-between; align-items: center; margin-bottom: 1.5rem; }
.link { background: none; border: 0; color: #2563eb; cursor: pointer; font-size: .875rem; }
.grid { columns: 1; column-gap: 1rem; }
@media (min-width: 640px) { .grid { columns: 2; } }
@media (min-width: 768px) { .grid { columns: 3; } }
.grid figure {
    break-inside: avoid; margin: 0 0 1rem; border-radius: .5rem; overflow: hidden;
    border: 1px solid #f3f4f6; background: #f9fafb; cursor: pointer;
}
.grid img { width: 100%; height: auto; display: block; }
.empty {
    background: #fefce8; border-left: 4px solid #facc15; padding: 1rem;
    border-radius: .375rem; color: #854d0e;
}
.empty h3 { margin: 0 0 .25rem; font-size: .875rem; }
.empty p { margin: 0; font-size: .875rem; }
.notice {
    position: fixed; top: 1rem; right: 1rem; padding: .75rem 1rem; border-radius: .625rem;
    background: #333; color: #fff; opacity: 0; transition: opacity .2s; pointer-events: none;
}
.notice.show { opacity: 1; }
.notice.error { background: #b91c1c; }
.lightbox {
    position: fixed; inset: 0; z-index: 50; background: rgba(0,0,0,.9);
    display: none; align-items: center; justify-content: center; padding: 1rem;
}
.lightbox.open { display: flex; }
.lightbox img { max-height: 90vh; max-width: 100%; object-fit: contain; border-radius: .5rem; }
.lightbox .close {
    position: absolute; top: .75rem; right: .75rem; background: rgba(0,0,0,.5); color: #fff;
    border: 0; border-radius: 999px; width: 2.5rem; height: 2.5rem; font-size: 1.25rem; cursor: pointer;
}
.hidden { display: none; }
footer { text-align: center; color: #6b7280; font-size: .75rem; margin-top: 2rem; }
"""

_SCRIPT = """
const form = document.getElementById('search-form');
const card = document.getElementById('card');
const results = document.getElementById('results');
const grid = document.getElementById('grid');
const empty = document.getElementById('empty');
const submit = document.getElementById('submit');
const notice = document.getElementById('notice');
const lightbox = document.getElementById('lightbox');
const lightboxImg = document.getElementById('lightbox-img');
let noticeTimer = null;

function showNotice(message, isError) {
    notice.textContent = message;
    notice.classList.toggle('error', Boolean(isError));
    notice.classList.add('show');
    clearTimeout(noticeTimer);
    noticeTimer = setTimeout(() => notice.classList.remove('show'), 3000);
}

function validateName(value) {
    return value && value.trim() ? '' : 'Name is required';
}

function validateRollNumber(value) {
    if (!value) return 'Roll Number is required';
    if (!/^[0-9]+$/.test(value)) return 'Roll Number must contain only digits';
    if (value.length !== ROLL_NUMBER_LENGTH) return 'Roll Number must be exactly ' + ROLL_NUMBER_LENGTH + ' digits';
    return '';
}

function setFieldError(name, message) {
    form.elements[name].classList.toggle('invalid', Boolean(message));
    document.getElementById(name + '-error').textContent = message;
}

form.elements.name.addEventListener('input', (e) => setFieldError('name', validateName(e.target.value)));
form.elements.rollNumber.addEventListener('input', (e) => {
    e.target.value = e.target.value.replace(/[^0-9]/g, '');
    setFieldError('rollNumber', validateRollNumber(e.target.value));
});

function openLightbox(url) {
    lightboxImg.src = url;
    lightbox.classList.add('open');
}

function closeLightbox() {
    lightbox.classList.remove('open');
    lightboxImg.removeAttribute('src');
}

lightbox.addEventListener('click', closeLightbox);
lightboxImg.addEventListener('click', (e) => e.stopPropagation());
lightboxImg.addEventListener('error', () => {
    if (lightboxImg.getAttribute('src') && lightboxImg.src !== PLACEHOLDER_FULL) lightboxImg.src = PLACEHOLDER_FULL;
});
document.getElementById('lightbox-close').addEventListener('click', closeLightbox);
document.addEventListener('keydown', (e) => { if (e.key === 'Escape') closeLightbox(); });

function absoluteUrl(url) {
    return url.startsWith('/') ? API_BASE + url : url;
}

function renderImages(images) {
    grid.replaceChildren();
    images.forEach((image, index) => {
        const figure = document.createElement('figure');
        const img = document.createElement('img');
        img.src = image.url;
        img.alt = 'Student image ' + (index + 1);
        img.loading = 'lazy';
        img.addEventListener('error', () => {
            img.src = PLACEHOLDER_THUMB;
            figure.dataset.failed = 'true';
        }, { once: true });
        figure.addEventListener('click', () => {
            if (!figure.dataset.failed) openLightbox(image.url);
        });
        figure.appendChild(img);
        grid.appendChild(figure);
    });
    grid.classList.toggle('hidden', images.length === 0);
    empty.classList.toggle('hidden', images.length !== 0);
}

function showResults(visible) {
    form.classList.toggle('hidden', visible);
    results.classList.toggle('hidden', !visible);
    card.classList.toggle('wide', visible);
}

document.getElementById('back').addEventListener('click', () => showResults(false));

form.addEventListener('submit', async (e) => {
    e.preventDefault();
    const name = form.elements.name.value;
    const rollNumber = form.elements.rollNumber.value;
    const level = form.elements.level.value;
    const nameError = validateName(name);
    const rollError = validateRollNumber(rollNumber);
    setFieldError('name', nameError);
    setFieldError('rollNumber', rollError);
    if (nameError || rollError) {
        showNotice(nameError || rollError, true);
        return;
    }

    submit.disabled = true;
    submit.textContent = 'Processing...';
    try {
        const params = new URLSearchParams({ rollNumber, level });
        const response = await fetch(API_BASE + '/api/images?' + params.toString());
        const data = await response.json().catch(() => ({}));
        if (!response.ok || !data.success) {
            throw new Error(data.message || 'Error: ' + response.status);
        }
        const images = data.images.map((image) => ({ ...image, url: absoluteUrl(image.url) }));
        renderImages(images);
        showResults(true);
        if (images.length > 0) {
            showNotice('Found ' + images.length + ' images for Roll No: ' + rollNumber, false);
        } else {
            showNotice('No images found for Roll No: ' + rollNumber, true);
        }
    } catch (err) {
        const message = err instanceof TypeError
            ? 'No response from server. Is the server running?'
            : err.message || 'Something went wrong';
        console.error(err);
        showNotice(message, true);
    } finally {
        submit.disabled = false;
        submit.textContent = 'View My Images';
    }
});
"""


def _level_options() -> str:
    return "\n".join(
        f'<option value="{level.value}"{" selected" if level is Level.UG else ""}>'
        f"{level.label} ({level.value})</option>"
        for level in Level
    )


def render_gallery_page(app_name: str, api_base: str = "", roll_number_length: int = 10) -> str:
    """Return HTML for the gallery lookup page.

    Args:
        app_name: Shown in the title and footer.
        api_base: Origin of the API; empty means same origin.
        roll_number_length: Digits required in a roll number.
    """
    title = html.escape(app_name)
    config = (
        f"const API_BASE = {json.dumps(api_base.rstrip('/'))};\n"
        f"const ROLL_NUMBER_LENGTH = {int(roll_number_length)};\n"
        f"const PLACEHOLDER_THUMB = {json.dumps(PLACEHOLDER_THUMB)};\n"
        f"const PLACEHOLDER_FULL = {json.dumps(PLACEHOLDER_FULL)};\n"
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Student Image Gallery | {title}</title>
    <style>{_STYLES}</style>
</head>
<body>
    <header><span class="badge">Student Gallery</span></header>
    <main>
        <div class="card" id="card">
            <h1>Student Image Gallery</h1>
            <p class="subtitle">Access your photos using your student credentials</p>

            <form id="search-form" novalidate>
                <div class="field">
                    <label for="name">Name <span class="req">*</span></label>
                    <input id="name" name="name" type="text" placeholder="Enter your full name" required>
                    <p class="field-error" id="name-error"></p>
                </div>
                <div class="field">
                    <label for="rollNumber">Roll Number <span class="req">*</span></label>
                    <input id="rollNumber" name="rollNumber" type="text" inputmode="numeric"
                           maxlength="{int(roll_number_length)}" pattern="[0-9]{{{int(roll_number_length)}}}"
                           placeholder="Enter your {int(roll_number_length)}-digit roll number" required>
                    <p class="field-error" id="rollNumber-error"></p>
                </div>
                <div class="field">
                    <label for="level">Level <span class="req">*</span></label>
                    <select id="level" name="level" required>
                        {_level_options()}
                    </select>
                </div>
                <button class="primary" id="submit" type="submit">View My Images</button>
            </form>

            <section id="results" class="hidden">
                <div class="results-head">
                    <h2>Your Images</h2>
                    <button class="link" id="back" type="button">&larr; Back to search</button>
                </div>
                <div class="grid" id="grid"></div>
                <div class="empty hidden" id="empty">
                    <h3>No images found</h3>
                    <p>We couldn't find any images associated with your student details.
                       Please verify your information is correct.</p>
                </div>
            </section>
        </div>
        <footer>&copy; Student Image Gallery. All rights reserved.</footer>
    </main>

    <div class="lightbox" id="lightbox">
        <button class="close" id="lightbox-close" type="button" aria-label="Close image">&times;</button>
        <img id="lightbox-img" alt="Full size image">
    </div>
    <div class="notice" id="notice" role="status"></div>

    <script>
{config}{_SCRIPT}
    </script>
</body>
</html>
"""
