"""
Builds the two-page bilingual CV document as HTML.

The renderer is pure: given a record and images it returns a complete
HTML string, which the PDF producer then prints.
"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from web.models import CandidateImages, CandidateRecord, ImageAsset, MedicalStatus
from web.services.layouts import CLASSIC, LayoutConfig, Organization
from web.services.translations import DEFAULT_TABLES, TranslationTables, transliterate

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
DOCUMENT_TEMPLATE = "cv/document.html"

# (record key, Arabic label, English label), in display order
SKILL_LABELS = (
    ("cleaning", "التنظيف", "Cleaning"),
    ("cooking", "الطبخ", "Cooking"),
    ("arabicCooking", "الطبخ العربي", "Arabic Cooking"),
    ("washing", "الغسيل", "Washing"),
    ("ironing", "الكي", "Ironing"),
    ("babysitting", "رعاية الأطفال", "Babysitting"),
    ("childrenCare", "العناية بالأطفال", "Children Care"),
    ("tutoring", "التدريس", "Tutoring"),
    ("disabledCare", "رعاية ذوي الاحتياجات", "Disabled Care"),
)

MEDICAL_LABELS = {
    MedicalStatus.FIT: ("fit", "✓ لائق طبياً / Medically Fit"),
    MedicalStatus.UNFIT: ("unfit", "✗ غير لائق / Not Fit"),
    MedicalStatus.PENDING: ("pending", "… قيد الفحص / Pending"),
}

NO_EXPERIENCE_LABEL = "لا يوجد خبرة سابقة / No previous experience"


def with_unit(value: str, unit: str) -> str:
    """Append a unit to a non-empty value; empty stays empty."""
    return f"{value} {unit}" if value else ""


def create_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class CvRenderer:
    """
    Lays a CandidateRecord out into the agency's CV template.

    Usage:
        renderer = CvRenderer(layout=get_layout("classic"), organization=org)
        html = renderer.render(record, logo, images)
    """

    def __init__(
        self,
        layout: LayoutConfig = CLASSIC,
        organization: Optional[Organization] = None,
        tables: TranslationTables = DEFAULT_TABLES,
        env: Optional[Environment] = None,
    ):
        self.layout = layout
        self.organization = organization or Organization()
        self.tables = tables
        self.env = env or create_environment()

    def bilingual(self, table: str, value: str) -> str:
        """'<arabic> / <english>' when a translation exists, else the value alone."""
        translated = self.tables.translate(table, value)
        if not value or translated == value:
            return value
        return f"{translated} / {value}"

    def skill_bar(self, level: str) -> list:
        """One bool per bar segment; the first `ordinal` segments are filled."""
        filled = self.tables.skill_level(level)
        return [i < filled for i in range(self.layout.skill_segments)]

    def display_name(self, record: CandidateRecord) -> str:
        """Arabic name for the hero block, falling back to transliteration, then English."""
        if record.full_name_ar:
            return record.full_name_ar
        if self.layout.transliterate_names and record.full_name:
            return transliterate(record.full_name) or record.full_name
        return record.full_name

    def build_context(
        self,
        record: CandidateRecord,
        logo: ImageAsset,
        images: CandidateImages,
    ) -> dict:
        t = self.tables.translate
        r = record

        pills = [
            ("الجنسية", t("nationality", r.nationality)),
            ("الديانة", t("religion", r.religion)),
            ("العمر", with_unit(r.age, "سنة")),
            ("الحالة", t("marital", r.marital_status)),
            ("الأولاد", r.number_of_children),
            ("الراتب", with_unit(r.monthly_salary, "ريال")),
        ]

        sections = [
            {
                "title_ar": "المعلومات الشخصية",
                "title_en": "Personal Information",
                "rows": [
                    ("الاسم الكامل", "Full Name", r.full_name),
                    ("الجنس", "Gender", self.bilingual("gender", r.gender)),
                    ("تاريخ الميلاد", "Date of Birth", r.date_of_birth),
                    ("الجنسية", "Nationality", self.bilingual("nationality", r.nationality)),
                    ("الديانة", "Religion", self.bilingual("religion", r.religion)),
                    ("الحالة الاجتماعية", "Marital Status", self.bilingual("marital", r.marital_status)),
                    ("عدد الأولاد", "Children", r.number_of_children),
                    ("رقم الجوال", "Mobile", r.mobile_number),
                    ("الإقامة الحالية", "Residence", r.current_residence),
                ],
            },
            {
                "title_ar": "معلومات العمل",
                "title_en": "Job Information",
                "rows": [
                    ("المهنة", "Profession", self.bilingual("profession", r.profession)),
                    ("الراتب الشهري", "Monthly Salary", with_unit(r.monthly_salary, "ريال / SAR")),
                    ("مدة العقد", "Contract Period", with_unit(r.contract_period, "سنة / Years")),
                ],
            },
            {
                "title_ar": "بيانات جواز السفر",
                "title_en": "Passport Details",
                "rows": [
                    ("رقم الجواز", "Passport No.", r.passport_number),
                    ("تاريخ الإصدار", "Issue Date", r.passport_issue_date),
                    ("تاريخ الانتهاء", "Expiry Date", r.passport_expiry_date),
                ],
            },
            {
                "title_ar": "التعليم واللغات",
                "title_en": "Education & Languages",
                "rows": [
                    ("المستوى التعليمي", "Education", self.bilingual("education", r.education_level)),
                    ("اللغة الإنجليزية", "English", self.bilingual("language", r.english_level)),
                    ("اللغة العربية", "Arabic", self.bilingual("language", r.arabic_level)),
                ],
            },
        ]

        skills = []
        for key, label_ar, label_en in SKILL_LABELS:
            level = r.skills.get(key, "")
            skills.append({
                "key": key,
                "label_ar": label_ar,
                "label_en": label_en,
                "segments": self.skill_bar(level),
                "level_label": t("skill", level),
            })

        experience = [
            {
                "country": e.country,
                "period": with_unit(e.period, "سنة"),
                "position": e.position,
            }
            for e in r.experience
        ]

        medical_class, medical_label = MEDICAL_LABELS[r.medical]

        return {
            "layout": self.layout,
            "palette": self.layout.palette,
            "org": self.organization,
            "logo_uri": logo.data_uri,
            "profile_uri": images.profile.data_uri,
            "full_photo_uri": images.full_photo.data_uri,
            "passport_uri": images.passport.data_uri,
            "name_display": self.display_name(r),
            "full_name": r.full_name,
            "passport_number": r.passport_number,
            "agency_name": r.agency_name,
            "pills": pills,
            "profession_label": t("profession", r.profession),
            "sections": sections,
            "experience": experience,
            "no_experience_label": NO_EXPERIENCE_LABEL,
            "physical_rows": [
                ("الطول", "Height", with_unit(r.height_cm, "سم / cm")),
                ("الوزن", "Weight", with_unit(r.weight_kg, "كغ / kg")),
            ],
            "medical_class": medical_class,
            "medical_label": medical_label,
            "skills": skills,
        }

    def render(
        self,
        record: CandidateRecord,
        logo: ImageAsset,
        images: Optional[CandidateImages] = None,
    ) -> str:
        """Render the full two-page HTML document."""
        images = images or CandidateImages()
        context = self.build_context(record, logo, images)
        logger.debug(f"Rendering {DOCUMENT_TEMPLATE} with layout '{self.layout.name}'")
        return self.env.get_template(DOCUMENT_TEMPLATE).render(**context)
