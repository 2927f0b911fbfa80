from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConversionRequest(BaseModel):
	# raw value: the service rejects bools, null and non-numeric strings with one message
	amount: Any = None
	from_currency: str | None = Field(None, alias='from')
	to_currency: str | None = Field(None, alias='to')

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={'example': {'amount': 100, 'from': 'USD', 'to': 'TWD'}},
	)

	def missing_fields(self) -> list[str]:
		missing = []
		if 'amount' not in self.model_fields_set:
			missing.append('amount')
		if not self.from_currency:
			missing.append('from')
		if not self.to_currency:
			missing.append('to')
		return missing
