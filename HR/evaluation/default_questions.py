"""
Default performance appraisal questionnaire.

Seeded into an organization the first time its appraisal questions are read,
and by ``manage.py seed_appraisal_questions``. The question key is the
lowercased title with spaces replaced by underscores; order follows the list.
"""

DEFAULT_APPRAISAL_QUESTIONS = [
    {
        'title': 'COMPETENCY MATCH',
        'how_to_measure': 'Job analysis vs. resume and actual duties',
        'good_indicator': 'Good Indicator: Job matches skills and qualifications',
        'red_flag': 'Red Flag: Mismatch between tasks and core skills',
        'rating_criteria': '5 = Full match, 3 = Partial, 1 = Misaligned',
    },
    {
        'title': 'ALIGNED KPIs',
        'how_to_measure': 'KPI documentation alignment with JD',
        'good_indicator': 'Good Indicator: KPIs directly reflect job duties',
        'red_flag': 'Red Flag: Irrelevant or misaligned KPIs',
        'rating_criteria': '5 = Full match, 3 = Partial, 1 = Misaligned',
    },
    {
        'title': 'ROLE UNDERSTANDING',
        'how_to_measure': 'Supervision required, task completion logs',
        'good_indicator': 'Good Indicator: Executes with autonomy',
        'red_flag': 'Red Flag: Constant need for supervision',
        'rating_criteria': '5 = Independent, 3 = Moderate guidance, 1 = Frequent hand-holding',
    },
    {
        'title': 'SUPERVISOR FEEDBACK',
        'how_to_measure': 'Quarterly feedback score',
        'good_indicator': 'Good Indicator: Consistently positive evaluations',
        'red_flag': 'Red Flag: Supervisor flags gaps repeatedly',
        'rating_criteria': '5 = Consistently positive, 3 = Mixed, 1 = Poor',
    },
    {
        'title': 'EXPECTATION MATCH',
        'how_to_measure': 'Number of escalations for clarity',
        'good_indicator': 'Good Indicator: Minimal clarification needed',
        'red_flag': 'Red Flag: Often confused about expectations',
        'rating_criteria': '5 = Rarely, 3 = Occasionally, 1 = Frequently',
    },
    {
        'title': 'STRENGTH UTILIZATION',
        'how_to_measure': '% of tasks in strength zone',
        'good_indicator': 'Good Indicator: Uses core strengths frequently',
        'red_flag': 'Red Flag: Working outside comfort zone often',
        'rating_criteria': '5 = >80%, 3 = 50-79%, 1 = <50%',
    },
    {
        'title': 'HIRING PURPOSE ALIGNMENT',
        'how_to_measure': 'Role change audit vs. original offer',
        'good_indicator': 'Good Indicator: Still aligned with hiring goals',
        'red_flag': 'Red Flag: Role drift without review or fit',
        'rating_criteria': '5 = Consistent, 3 = Some shift, 1 = Major drift',
    },
    {
        'title': 'REDEPLOYMENT UNNECESSARY',
        'how_to_measure': 'Redeployment request frequency',
        'good_indicator': 'Good Indicator: Well-placed and stable',
        'red_flag': 'Red Flag: Redeployment actively considered',
        'rating_criteria': '5 = Never, 3 = Discussed, 1 = Recommended',
    },
    {
        'title': 'ONGOING LEARNING',
        'how_to_measure': 'Number of completed role-relevant courses',
        'good_indicator': 'Good Indicator: Recent relevant training',
        'red_flag': 'Red Flag: No learning undertaken recently',
        'rating_criteria': '5 = 2 or more, 3 = 1, 1 = None',
    },
    {
        'title': 'ERROR RATE',
        'how_to_measure': '% of deliverables needing rework',
        'good_indicator': 'Good Indicator: Low correction/rework levels',
        'red_flag': 'Red Flag: Frequent errors or rework',
        'rating_criteria': '5 = <10%, 3 = 10-20%, 1 = >20%',
    },
    {
        'title': 'TIMELINES',
        'how_to_measure': '% of tasks delivered on or before due date',
        'good_indicator': 'Good Indicator: Consistently meets deadlines',
        'red_flag': 'Red Flag: Regular delays or deadline extensions',
        'rating_criteria': '5 = 95% or more, 3 = 80-94%, 1 = <80%',
    },
    {
        'title': 'TOOL UTILIZATION',
        'how_to_measure': 'Tech/tool usage rate',
        'good_indicator': 'Good Indicator: Uses tools to optimize work',
        'red_flag': 'Red Flag: Resists adopting helpful technologies',
        'rating_criteria': '5 = High usage, 3 = Moderate, 1 = Avoids tools',
    },
    {
        'title': 'PROCESS OPTIMIZATION',
        'how_to_measure': 'Number of suggestions implemented',
        'good_indicator': 'Good Indicator: Improves or streamlines work',
        'red_flag': 'Red Flag: Makes no process improvement effort',
        'rating_criteria': '5 = 3 or more per quarter, 3 = 1-2, 1 = None',
    },
    {
        'title': 'CONTINUOUS IMPROVEMENT',
        'how_to_measure': 'Courses/programs in 6 months',
        'good_indicator': 'Good Indicator: Participates in learning initiatives',
        'red_flag': 'Red Flag: No recent development participation',
        'rating_criteria': '5 = 2 or more, 3 = 1, 1 = None',
    },
    {
        'title': 'TIME MANAGEMENT',
        'how_to_measure': 'Idle time report',
        'good_indicator': 'Good Indicator: High productivity per time',
        'red_flag': 'Red Flag: Extended idle periods or poor focus',
        'rating_criteria': '5 = <10%, 3 = 10-20%, 1 = >20%',
    },
    {
        'title': 'MINIMAL REWORK',
        'how_to_measure': 'Supervisor corrections per task',
        'good_indicator': 'Good Indicator: Work needs no revisions',
        'red_flag': 'Red Flag: Work often requires corrections',
        'rating_criteria': '5 = Rarely, 3 = Sometimes, 1 = Frequently',
    },
    {
        'title': 'FLEXIBILITY',
        'how_to_measure': 'Response time to change',
        'good_indicator': 'Good Indicator: Adapts well to change',
        'red_flag': 'Red Flag: Struggles with unexpected change',
        'rating_criteria': '5 = Immediate, 3 = Delayed, 1 = Resists',
    },
    {
        'title': 'URGENCY AWARENESS',
        'how_to_measure': 'Time-sensitive task success rate',
        'good_indicator': 'Good Indicator: Responds with urgency as needed',
        'red_flag': 'Red Flag: Delays critical responses or actions',
        'rating_criteria': '5 = Always meets, 3 = Mixed, 1 = Misses',
    },
    {
        'title': 'PRODUCTIVITY',
        'how_to_measure': 'Output vs. time spent',
        'good_indicator': 'Good Indicator: High output with efficient time use',
        'red_flag': 'Red Flag: Low output despite time spent',
        'rating_criteria': '5 = Excellent, 4 = Good, 3 = Average, 2 = Below Average, 1 = Poor',
    },
    {
        'title': 'PROFIT IMPACT',
        'how_to_measure': 'Contribution to revenue/cost savings',
        'good_indicator': 'Good Indicator: Positive impact on profitability',
        'red_flag': 'Red Flag: Negative or no impact on profitability',
        'rating_criteria': '5 = Excellent, 4 = Good, 3 = Average, 2 = Below Average, 1 = Poor',
    },
]


def question_key(title):
    return '_'.join(title.lower().split())
