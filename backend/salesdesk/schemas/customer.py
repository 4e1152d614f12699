"""
SalesDesk API — Customer Schemas
=================================

What:  Pydantic models describing customer payloads and responses.
Who:   Route handlers use them as response models; the OpenAPI builder
       publishes CustomerCreate and CustomerPatch as request body schemas.

Request bodies are NOT parsed through these models. Incoming JSON is
normalized and validated by services.customer_payload so that error
messages keep their field-by-field wording; the models here only shape
responses and documentation.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CustomerSummary(BaseModel):
    """
    What:  Reduced column set returned by GET /api/customers.
    """
    CUST_CODE: str = Field(description="Customer code (5-6 alphanumerics)", examples=["C00001"])
    CUST_NAME: Optional[str] = Field(default=None, examples=["Acme Corp"])
    CUST_CITY: Optional[str] = Field(default=None, examples=["Charlotte"])
    WORKING_AREA: Optional[str] = Field(default=None, examples=["South"])
    CUST_COUNTRY: Optional[str] = Field(default=None, examples=["USA"])
    GRADE: Optional[int] = Field(default=None, examples=[2])

    model_config = {"from_attributes": True}


class Customer(BaseModel):
    """
    What:  Full customer representation.
    Who:   Returned by GET/POST/PUT/PATCH on /api/customers.
    """
    CUST_CODE: str = Field(description="Customer code (5-6 alphanumerics)", examples=["C00001"])
    CUST_NAME: str = Field(examples=["Acme Corp"])
    CUST_CITY: Optional[str] = Field(default=None, examples=["Charlotte"])
    WORKING_AREA: str = Field(examples=["South"])
    CUST_COUNTRY: str = Field(examples=["USA"])
    GRADE: Optional[int] = Field(default=None, examples=[2])
    OPENING_AMT: float = Field(examples=[1000.5])
    RECEIVE_AMT: float = Field(examples=[200.0])
    PAYMENT_AMT: float = Field(examples=[50.0])
    OUTSTANDING_AMT: float = Field(examples=[1150.5])
    PHONE_NO: str = Field(examples=["555-123-4567"])
    AGENT_CODE: Optional[str] = Field(default=None, examples=["A001"])

    model_config = {"from_attributes": True}


class CustomerCreate(Customer):
    """
    What:  Body of POST /api/customers and PUT /api/customers/{code}.
    How:   Same fields as Customer; on PUT the path code replaces CUST_CODE.
    """


class CustomerPatch(BaseModel):
    """
    What:  Body of PATCH /api/customers/{code}.
    How:   Any subset of the mutable fields. CUST_CODE and unknown keys are
           ignored; at least one recognized field is required.
    """
    CUST_NAME: Optional[str] = None
    CUST_CITY: Optional[str] = None
    WORKING_AREA: Optional[str] = None
    CUST_COUNTRY: Optional[str] = None
    GRADE: Optional[int] = None
    OPENING_AMT: Optional[float] = None
    RECEIVE_AMT: Optional[float] = None
    PAYMENT_AMT: Optional[float] = None
    OUTSTANDING_AMT: Optional[float] = None
    PHONE_NO: Optional[str] = None
    AGENT_CODE: Optional[str] = None
