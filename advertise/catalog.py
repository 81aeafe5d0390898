"""Advertisements currently on sale and the limits every slot enforces.

Edit this file and redeploy to change what is shown. Every entry is checked
by `manage.py check_advertisements`.
"""

_INTERVIEW_READY_AI_ENGINEERING = {
    "id": "affiliate-interview-ready-ai-engineering",
    "title": "AI Engineering for Developers",
    "content": (
        "This is the best time to learn about AI. Good AI fundamentals make you a better developer "
        "and a product builder. We recommend you to checkout InterviewReady's AI Engineering course. "
        "It is a high-quality resource!"
    ),
    "cta": {
        "url": "https://interviewready.io/checkout/?_aff=kkhqugif87496",
        "text": "Checkout the course!",
    },
    "type": "CONTENT_OVERVIEW_PAGE",
}

ADVERTISEMENTS = {
    "TOP_BANNER": {
        "id": "fh-stackpack",
        "content": "Our Feature Flags course is now live!",
        "cta": {
            "url": "https://youtu.be/uA63G1pRchE",
            "text": "Watch the intro",
        },
    },
    "HOME_PAGE": {**_INTERVIEW_READY_AI_ENGINEERING, "type": "HOME_PAGE"},
    "QUESTIONS_PAGE": {
        "id": "affiliate-great-frontend",
        "title": "GreatFrontEnd has better questions!",
        "content": (
            "We don't create questions because GreatFrontEnd already has the best possible library "
            "of questions and we recommend the same to our community."
        ),
        "cta": {
            "url": "https://www.greatfrontend.com/prepare/coding?fpr=hruthik-reddy22",
            "text": "Checkout the questions!",
        },
        "type": "CONTENT_OVERVIEW_PAGE",
    },
    "CONTENT_OVERVIEW_PAGES": {
        "frontend-courses-todo-app-react-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-courses-todo-app-svelte-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-courses-stackpack-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-courses-login-register-flow-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-refactoring-profile-page-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-system-design-dynamic-pricing-page-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-courses-dynamic-pricing-page-overview": _INTERVIEW_READY_AI_ENGINEERING,
        "frontend-refactoring-feature-flags-overview": _INTERVIEW_READY_AI_ENGINEERING,
    },
}

ADVERTISEMENT_CONSTRAINTS = {
    "TOP_BANNER": {
        "maxLength": 55,
        "price": "$50",
        "duration": "2 weeks",
    },
    "CONTENT_OVERVIEW_PAGE": {
        "maxTitleLength": 55,
        "maxContentLength": 400,
        "price": "$50",
        "duration": "2 weeks",
    },
    "HOME_PAGE": {
        "maxTitleLength": 55,
        "maxContentLength": 800,
        "price": "$100",
        "duration": "4 weeks",
    },
}
