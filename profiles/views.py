"""
Profile settings views.
"""

import logging

from django.contrib import messages
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from .error_messages import error_message
from .forms import ProfileForm
from .phone_mask import apply_phone_mask, extract_digits
from .rules import FIELD_IDS, validate

logger = logging.getLogger(__name__)


def edit_profile(request):
    """Show and submit the profile settings form."""
    if request.method == 'POST':
        form = ProfileForm(request.POST)
        if form.is_valid():
            # Nothing is persisted; the submission is only recorded in the log.
            logger.info(f"Profile submitted: {form.cleaned_data}")
            messages.success(request, 'Your profile has been updated successfully!')
            return redirect('profiles:edit_profile')
    else:
        form = ProfileForm()

    context = {
        'form': form,
    }

    return render(request, 'profiles/edit_profile.html', context)


@require_POST
def change_photo(request):
    """Placeholder for profile photo upload."""
    logger.info("Profile photo change requested")
    messages.info(request, 'Photo upload is not available yet.')
    return redirect('profiles:edit_profile')


@require_GET
def phone_mask(request):
    """AJAX endpoint that masks the phone field on every keystroke."""
    formatted = apply_phone_mask(
        request.GET.get('previous', ''),
        request.GET.get('value', ''),
    )
    return JsonResponse({'value': formatted, 'digits': extract_digits(formatted)})


@require_GET
def validate_field(request, field_id):
    """AJAX endpoint returning the verdict for a single field value."""
    if field_id not in FIELD_IDS:
        raise Http404(f"Unknown profile field: {field_id}")

    value = request.GET.get('value', '')
    touched = request.GET.get('touched', '').lower() in ('1', 'true', 'yes')
    verdict = validate(field_id, value)

    return JsonResponse({
        'field': field_id,
        'valid': verdict.is_valid,
        'error': verdict.error.value if verdict.error else None,
        'message': error_message(field_id, verdict, touched=touched),
    })
