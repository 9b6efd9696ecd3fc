"""Message catalogue keyed by locale."""

TRANSLATIONS = {
    "en": {
        "errors.resource_not_found": "Resource not found",
        "errors.not_authenticated": "Not authenticated",
        "errors.permission_denied": "Permission denied",
        "errors.validation_error": "Validation error",
        "errors.resource_conflict": "Resource conflict",
        "errors.monument_not_found": "Monument not found",
        "errors.slug_conflict": "Could not assign a unique slug, please retry",
        "errors.slug_exhausted": "Unable to generate a unique slug for '{slug}'",
        "errors.invalid_credentials": "Incorrect email or password",
        "errors.user_inactive": "User is inactive",
    },
    "ar": {
        "errors.resource_not_found": "المورد غير موجود",
        "errors.not_authenticated": "لم تتم المصادقة",
        "errors.permission_denied": "تم رفض الإذن",
        "errors.validation_error": "خطأ في التحقق",
        "errors.resource_conflict": "تعارض في المورد",
        "errors.monument_not_found": "المعلم غير موجود",
        "errors.slug_conflict": "تعذر تعيين معرف فريد، يرجى المحاولة مرة أخرى",
        "errors.slug_exhausted": "تعذر إنشاء معرف فريد لـ '{slug}'",
        "errors.invalid_credentials": "البريد الإلكتروني أو كلمة المرور غير صحيحة",
        "errors.user_inactive": "المستخدم غير نشط",
    },
}
