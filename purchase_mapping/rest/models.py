from typing import Dict, Any, Optional, List, Union
from pydantic import BaseModel


class PurchasesQuery(BaseModel):
    limit: int = 100
    status: Optional[str] = None
    source: Optional[str] = None


class PurchasesResponse(BaseModel):
    success: bool
    data: Optional[Union[Dict[str, Any], List[Any]]] = None
    purchases: Optional[List[Dict[str, Any]]] = None
    count: Optional[int] = None
    error: Optional[str] = None

    def payload(self) -> Union[Dict[str, Any], List[Any]]:
        if self.data is not None:
            return self.data
        return {"purchases": self.purchases or []}
