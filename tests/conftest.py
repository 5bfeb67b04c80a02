# tests/conftest.py
from datetime import date

import pytest


@pytest.fixture
def thai_rows():
    """A hand-maintained company sheet, the way admins actually fill it in."""
    return [
        ["ณ วันที่", "15/01/2026"],
        ["ชื่อบริษัท", "บริษัท ตัวอย่าง จำกัด"],
        ["Company Name", "Example Co., Ltd."],
        ["เลขทะเบียนนิติบุคคล", "0105551234567"],
        [],
        ["กรรมการ", "3 คน"],
        ["1", "นายสมชาย ใจดี", "กรรมการผู้จัดการ"],
        ["2", "นางสาวสมหญิง รักดี", "กรรมการ"],
        ["", "Mr. John Smith", "Director"],
        ["อำนาจกรรมการ", "กรรมการคนใดคนหนึ่งลงลายมือชื่อ"],
        ["ทุนจดทะเบียน", "1,000,000 บาท"],
        ["ที่ตั้งสำนักงานใหญ่", "99 ถนนสุขุมวิท กรุงเทพฯ"],
        ["วัตถุประสงค์", "ซื้อขายสินค้า"],
        ["ตราประทับ", "https://drive.google.com/file/d/SEAL123/view"],
        ["จำนวนหุ้น", "10,000 หุ้น"],
        ["มูลค่าหุ้นละ", "100 บาท"],
        [],
        ["ผู้ถือหุ้น"],
        ["ลำดับ", "ชื่อผู้ถือหุ้น", "จำนวนหุ้น", "ร้อยละ"],
        ["1", "นายสมชาย ใจดี", "6,000", "60%"],
        ["2", "นางสาวสมหญิง รักดี", "4,000", "40%"],
        [],
        ["เอกสาร"],
        ["ชื่อเอกสาร", "ลิงก์", "วันที่อัปเดต", "วันหมดอายุ"],
        ["หนังสือรับรอง", "https://drive.google.com/file/d/DOC1/view", "01/01/2026", "31/03/2026"],
        ["ภพ.20", "DOC2", "", ""],
        ["หมายเหตุ", "ตรวจสอบทุกไตรมาส"],
    ]


@pytest.fixture
def english_rows():
    return [
        ["Company Name", "Acme Trading Co., Ltd."],
        ["Registration No", "0105559999999"],
        ["Directors", ""],
        ["1", "Alice Walker", "Managing Director"],
        ["2", "Bob Stone", "Director"],
        ["Director Authority", "Any one director signs with the company seal"],
        ["Registered Capital", "2,500,000"],
        ["Company Seal", "https://cdn.example.com/seals/acme.png"],
        ["Shareholders"],
        ["No.", "Name", "Shares", "%"],
        ["1", "Alice Walker", "750"],
        ["2", "Bob Stone", "250"],
    ]


@pytest.fixture
def today():
    return date(2026, 3, 1)
