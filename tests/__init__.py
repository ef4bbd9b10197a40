from typing import Callable, List
from unittest import TestCase

import httpx
from fastapi.testclient import TestClient

from main import app
from tcmb_service import get_http_client

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Tarih_Date Tarih="17.10.2026" Date="10/17/2026" Bulten_No="2026/199">
    <Currency CrossOrder="0" Kod="USD" CurrencyCode="USD">
        <Unit>1</Unit>
        <Isim>ABD DOLARI</Isim>
        <CurrencyName>US DOLLAR</CurrencyName>
        <ForexBuying>40,0000</ForexBuying>
        <ForexSelling>40,0000</ForexSelling>
        <BanknoteBuying>39,9000</BanknoteBuying>
        <BanknoteSelling>40,1000</BanknoteSelling>
    </Currency>
    <Currency CrossOrder="9" Kod="EUR" CurrencyCode="EUR">
        <Unit>1</Unit>
        <Isim>EURO</Isim>
        <CurrencyName>EURO</CurrencyName>
        <ForexBuying>46,5000</ForexBuying>
        <ForexSelling>46,6000</ForexSelling>
        <BanknoteBuying>46,4000</BanknoteBuying>
        <BanknoteSelling>46,7000</BanknoteSelling>
    </Currency>
    <Currency CrossOrder="12" Kod="IRR" CurrencyCode="IRR">
        <Unit>100</Unit>
        <Isim>İRAN RİYALİ</Isim>
        <CurrencyName>IRANIAN RIAL</CurrencyName>
        <ForexBuying></ForexBuying>
        <ForexSelling></ForexSelling>
        <BanknoteBuying>0,0950</BanknoteBuying>
        <BanknoteSelling>0,0960</BanknoteSelling>
    </Currency>
    <Currency CrossOrder="13" Kod="XDR" CurrencyCode="XDR">
        <Unit>1</Unit>
        <Isim>ÖZEL ÇEKME HAKKI (SDR)</Isim>
        <CurrencyName>SPECIAL DRAWING RIGHT (SDR)</CurrencyName>
        <ForexBuying></ForexBuying>
        <ForexSelling></ForexSelling>
        <BanknoteBuying></BanknoteBuying>
        <BanknoteSelling></BanknoteSelling>
    </Currency>
</Tarih_Date>
"""


def xml_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text=SAMPLE_XML)


class BaseTestCase(TestCase):
    '''
    Runs the app against a fake TCMB upstream.
    Subclasses replace self.handler to change what the upstream answers.
    '''
    def setUp(self):
        self.requested: List[str] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = xml_response

        async def override_http_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(self._dispatch)) as client:
                yield client

        app.dependency_overrides[get_http_client] = override_http_client
        self.client = TestClient(app)
        self.maxDiff = None

    def tearDown(self):
        app.dependency_overrides.clear()

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(str(request.url))
        return self.handler(request)
