import pytest

from application.services.plan_validator import PlanValidator
from domain.exceptions import ValidationError
from domain.plan import BootstrapPlan, PlanMeta
from domain.steps import CheckToolStep, Step


def plan(*steps):
    return BootstrapPlan(meta=PlanMeta(id="p", name="Plan"), steps=list(steps))


def test_valid_plan_passes():
    PlanValidator().validate(plan(Step(id="a", name="A"), Step(id="b", name="B")))


def test_empty_plan_is_rejected():
    with pytest.raises(ValidationError, match="no steps"):
        PlanValidator().validate(plan())


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValidationError, match="Duplicate step id: a"):
        PlanValidator().validate(plan(Step(id="a", name="A"), Step(id="a", name="Again")))


def test_blank_id_is_rejected():
    with pytest.raises(ValidationError, match="empty id"):
        PlanValidator().validate(plan(Step(id=" ", name="A")))


def test_blank_name_is_rejected():
    with pytest.raises(ValidationError, match="empty name"):
        PlanValidator().validate(plan(Step(id="a", name="")))


def test_unparseable_min_version_is_rejected():
    step = CheckToolStep(id="check-node", name="Check Node.js", tool="node", min_version="latest")

    with pytest.raises(ValidationError, match="invalid min_version: latest"):
        PlanValidator().validate(plan(step))


def test_check_tool_without_min_version_passes():
    PlanValidator().validate(plan(CheckToolStep(id="check-git", name="Check Git", tool="git")))
