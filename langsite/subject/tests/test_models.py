# subject/tests/test_models.py
from django.core.cache import cache
from django.test import TestCase
from domain.models import Domain
from subject.models import Subject


class SubjectModelTests(TestCase):
    def setUp(self):
        cache.clear()

    def test_str_fallback(self):
        s = Subject.objects.create(langcode="en")
        self.assertEqual(str(s), f"Subject#{s.pk}")

    def test_subjects_related_name(self):
        d = Domain.objects.create(langcode="en")
        s = Subject.objects.create(domain=d, langcode="de")
        self.assertEqual(list(d.subjects.all()), [s])
