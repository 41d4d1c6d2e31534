from django.core.management.base import BaseCommand, CommandError

from HR.evaluation.services import AppraisalQuestionService
from HR.work_structures.models import Organization


class Command(BaseCommand):
    help = 'Seed the default appraisal questionnaire for organizations that have none'

    def add_arguments(self, parser):
        parser.add_argument(
            '--organization',
            help='Slug of a single organization to seed (default: all organizations)',
        )

    def handle(self, *args, **options):
        organizations = Organization.objects.all()
        slug = options.get('organization')
        if slug:
            organizations = organizations.filter(slug=slug)
            if not organizations.exists():
                raise CommandError(f'Organization "{slug}" not found')

        total = 0
        for organization in organizations:
            created = AppraisalQuestionService.ensure_default_questions(organization)
            total += created
            if created:
                self.stdout.write(f'  {organization.name}: {created} questions created')
            else:
                self.stdout.write(f'  {organization.name}: already has questions, skipped')

        self.stdout.write(self.style.SUCCESS(f'\n* Seeded {total} appraisal questions'))
