from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from core.base.test_utils import create_organization
from HR.evaluation.models import AppraisalQuestion


class SeedAppraisalQuestionsCommandTest(TestCase):

    def setUp(self):
        self.acme = create_organization("Acme", slug="acme")
        self.globex = create_organization("Globex", slug="globex")

    def test_seeds_every_organization_once(self):
        out = StringIO()
        call_command('seed_appraisal_questions', stdout=out)
        call_command('seed_appraisal_questions', stdout=out)

        self.assertEqual(AppraisalQuestion.objects.filter(organization=self.acme).count(), 20)
        self.assertEqual(AppraisalQuestion.objects.filter(organization=self.globex).count(), 20)
        self.assertIn('already has questions', out.getvalue())

    def test_single_organization(self):
        call_command('seed_appraisal_questions', organization='acme', stdout=StringIO())

        self.assertEqual(AppraisalQuestion.objects.filter(organization=self.acme).count(), 20)
        self.assertFalse(AppraisalQuestion.objects.filter(organization=self.globex).exists())

    def test_unknown_organization(self):
        with self.assertRaises(CommandError):
            call_command('seed_appraisal_questions', organization='initech', stdout=StringIO())
