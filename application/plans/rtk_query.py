from __future__ import annotations

from application.plans import templates
from application.plans.options import PlanOptions
from application.plans.prerequisites import check_npm, npm_install
from domain.plan import BootstrapPlan, PlanMeta
from domain.steps import EnsureDirsStep, WriteFileStep

RTK_PACKAGES = ("@reduxjs/toolkit", "react-redux", "axios")


def build_rtk_query_plan(options: PlanOptions) -> BootstrapPlan:
    return BootstrapPlan(
        meta=PlanMeta(
            id="rtk-query",
            name="Redux Toolkit Query scaffold",
            description="Add an RTK Query API slice, store and CRUD pages for posts.",
        ),
        steps=[
            check_npm(),
            EnsureDirsStep(
                id="scaffold-dirs",
                name="Create directories",
                directories=["src/app", "pages/posts"],
            ),
            npm_install(*RTK_PACKAGES),
            WriteFileStep(
                id="rtk-api",
                name="Generate API slice",
                path="src/app/api.js",
                template=templates.RTK_API,
            ),
            WriteFileStep(
                id="rtk-store",
                name="Configure Redux store",
                path="src/app/store.js",
                template=templates.RTK_STORE,
            ),
            WriteFileStep(
                id="rtk-app",
                name="Integrate Redux Provider",
                path="pages/_app.js",
                template=templates.RTK_APP,
            ),
            WriteFileStep(
                id="rtk-posts-index",
                name="Create posts list page",
                path="pages/posts/index.js",
                template=templates.RTK_POSTS_INDEX,
            ),
            WriteFileStep(
                id="rtk-post-edit",
                name="Create post edit page",
                path="pages/posts/[postId].js",
                template=templates.RTK_POST_EDIT,
            ),
        ],
    )
