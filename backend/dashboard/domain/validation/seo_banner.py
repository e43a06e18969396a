from dashboard.domain.forms.seo_banner import SeoBannerForm
from .rules import ErrorMap
from .seo import validate_banner, validate_seo


def validate_seo_banner(form: SeoBannerForm) -> ErrorMap:
    errors: ErrorMap = {}
    errors.update(validate_seo(form.seo))
    errors.update(validate_banner(form.banner))
    return errors
