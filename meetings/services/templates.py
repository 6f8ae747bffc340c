# meetings/services/templates.py
# قوالب جدول أعمال جاهزة لاجتماعات 1on1 مع موظفي SES

ONE_ON_ONE_TEMPLATES = (
    {
        "key": "monthly",
        "name": "Monthly check-in",
        "description": "Template for the regular monthly one-on-one.",
        "agendas": (
            {"title": "Review of last time's next actions", "description": "Progress on the actions agreed last time."},
            {"title": "This month's work", "description": "Progress, issues and results on the assigned project."},
            {"title": "Goal progress", "description": "Status and blockers of the OKR goals."},
            {"title": "Skills and career", "description": "Technologies to learn, certifications to take, career direction."},
            {"title": "Issues at the client site", "description": "Problems at the client, relationships, working environment."},
            {"title": "Requests to the company or team", "description": "Requests and suggestions on policies, environment and support."},
            {"title": "Next month's focus", "description": "What to concentrate on next month."},
        ),
    },
    {
        "key": "project_onboarding",
        "name": "New project onboarding",
        "description": "Early follow-up after joining a new project.",
        "agendas": (
            {"title": "Project overview", "description": "Understanding of the tasks, tech stack and team."},
            {"title": "Adapting to the site", "description": "Client culture, way of working, communication style."},
            {"title": "Technical concerns", "description": "Difficulties with new technologies, tools or processes."},
            {"title": "Catch-up plan", "description": "Learning plan for the skills the project needs."},
            {"title": "Support network", "description": "Who to ask questions and where to get help."},
            {"title": "Short-term goals", "description": "Targets for the first one to three months."},
        ),
    },
    {
        "key": "quarterly_review",
        "name": "Quarterly review",
        "description": "Look back on the quarter and plan the next one.",
        "agendas": (
            {"title": "Quarter retrospective", "description": "What went well, issues and lessons."},
            {"title": "Goal achievement", "description": "How far the goals were met and why."},
            {"title": "Skills and growth", "description": "Skills gained, sense of growth, feedback from others."},
            {"title": "Next quarter's goals", "description": "Challenges and learning for the next quarter."},
            {"title": "Career plan review", "description": "Check and adjust the mid to long-term direction."},
        ),
    },
    {
        "key": "problem_solving",
        "name": "Problem solving and improvement",
        "description": "Deep dive into a specific issue or improvement proposal.",
        "agendas": (
            {"title": "Define the problem", "description": "Lay out the current problem in detail."},
            {"title": "Root cause analysis", "description": "Find the underlying cause."},
            {"title": "Improvement options", "description": "Draft concrete improvements."},
            {"title": "Action plan", "description": "Concrete plan to carry out the improvement."},
            {"title": "Measuring results", "description": "How the effect of the improvement will be measured."},
        ),
    },
)


def get_one_on_one_templates() -> list[dict]:
    return [
        {**template, "agendas": [dict(a) for a in template["agendas"]]}
        for template in ONE_ON_ONE_TEMPLATES
    ]
