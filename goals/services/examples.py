# goals/services/examples.py
# أمثلة أهداف لموظفي SES (يعملون لدى العملاء) + أمثلة وحدات Key Result

GOAL_EXAMPLES = (
    {
        "title": "Raise customer satisfaction on the assigned project",
        "description": (
            "Grow technical strength at the client site and keep communication smooth, "
            "maximising customer satisfaction and leading to the next contract renewal."
        ),
        "key_results": (
            {
                "title": "Earn a high score in the customer satisfaction survey",
                "target_value": 4.5,
                "unit": "points",
                "description": "Average of 4.5 or higher on a five-point scale.",
            },
            {
                "title": "Keep the monthly report rating",
                "target_value": 90,
                "unit": "%",
                "description": "Keep 'satisfied' or better on 90% of the client's monthly reports.",
            },
            {
                "title": "Strengthen proposals with a technical certification",
                "target_value": 1,
                "unit": "certifications",
                "description": "Pass the AWS Solutions Architect exam to broaden technical proposals.",
            },
        ),
    },
    {
        "title": "Add value through personal skill growth",
        "description": (
            "Learn new technical skills and deliver more value to the team and to customers."
        ),
        "key_results": (
            {
                "title": "Learn new front-end frameworks",
                "target_value": 2,
                "unit": "frameworks",
                "description": "Learn at least two modern frameworks such as React or Vue.js.",
            },
            {
                "title": "Present at internal study sessions",
                "target_value": 3,
                "unit": "times",
                "description": "Share what was learned at internal study sessions three or more times.",
            },
            {
                "title": "Use the new technology on a real project",
                "target_value": 1,
                "unit": "projects",
                "description": "Apply the learned technology on an actual client project.",
            },
        ),
    },
)

KEY_RESULT_UNIT_EXAMPLES = (
    "items", "times", "people", "hours", "days", "weeks", "months",
    "%", "points", "JPY", "10k JPY", "pieces", "books", "certifications",
)


def get_goal_examples() -> list[dict]:
    return [
        {**example, "key_results": [dict(kr) for kr in example["key_results"]]}
        for example in GOAL_EXAMPLES
    ]


def get_key_result_unit_examples() -> list[str]:
    return list(KEY_RESULT_UNIT_EXAMPLES)
