"""Validators for car-mutating commands."""

from carbuilder.application.cars.commands.create_car import CreateCarCommand
from carbuilder.application.cars.commands.update_car import UpdateCarCommand
from carbuilder.application.common.validation import Validator
from carbuilder.domain.cars.rules import CAR_RULES


class CreateCarCommandValidator(Validator[CreateCarCommand]):
    rules = CAR_RULES


class UpdateCarCommandValidator(Validator[UpdateCarCommand]):
    rules = CAR_RULES
