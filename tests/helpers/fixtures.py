"""Literal API responses used across the tests."""

NS = 'xmlns="http://api.esendex.com/ns/"'

ACCOUNTS = f"""<?xml version="1.0" encoding="utf-8"?>
<accounts {NS}>
 <account id="accountid" uri="http://someaccount">
  <reference>EX093052</reference>
  <label>My account</label>
  <address>443523</address>
  <type>Professional</type>
  <messagesremaining>2322</messagesremaining>
  <expireson>2012-01-01T12:00:05</expireson>
  <role>CoolUser</role>
  <settings uri="http://somesettings" />
 </account>
</accounts>"""

SENT_MESSAGES = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheaders startindex="0" count="15" totalcount="200" {NS}>
 <messageheader id="messageheaderid" uri="http://somemessageheader">
  <reference>EXETRTRE</reference>
  <status>STATUS</status>
  <laststatusat>2012-01-01T12:00:05.000</laststatusat>
  <submittedat>2012-01-01T12:00:02.000</submittedat>
  <type>TYPE</type>
  <to>
    <phonenumber>4538224364236</phonenumber>
  </to>
  <from>
   <phonenumber>428377843</phonenumber>
  </from>
  <summary>SUM</summary>
  <body uri="http://rrehekr"/>
  <direction>OUT</direction>
  <parts>1</parts>
  <username>user</username>
 </messageheader>
</messageheaders>"""

SENT_MESSAGES_FAILED = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheaders startindex="0" count="1" totalcount="1" {NS}>
 <messageheader id="failedid" uri="http://failed">
  <status>Failed</status>
  <submittedat>2012-01-01T12:00:02Z</submittedat>
  <to><phonenumber>447700900000</phonenumber></to>
  <failurereason>
   <code>12</code>
   <description>Unknown subscriber</description>
   <permanentfailure>true</permanentfailure>
  </failurereason>
 </messageheader>
</messageheaders>"""

EMPTY_MESSAGES = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheaders startindex="40" count="0" totalcount="40" {NS} />"""

RECEIVED_MESSAGES = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheaders startindex="0" count="15" totalcount="200" {NS}>
 <messageheader id="messageheaderid" uri="http://somemessageheader">
  <reference>EXETRTRE</reference>
  <status>STATUS</status>
  <receivedat>2012-01-01T12:00:05</receivedat>
  <type>TYPE</type>
  <to>
    <phonenumber>4538224364236</phonenumber>
  </to>
  <from>
   <phonenumber>428377843</phonenumber>
  </from>
  <summary>SUM</summary>
  <body uri="http://rrehekr"/>
  <direction>OUT</direction>
  <parts>1</parts>
  <readat>2012-01-01T12:00:02</readat>
  <readby>someone</readby>
 </messageheader>
</messageheaders>"""

MESSAGE_HEADER = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheader id="messageheaderid" uri="http://somemessageheader" {NS}>
 <reference>EXETRTRE</reference>
 <status>STATUS</status>
 <laststatusat>2012-01-01T12:00:05.000Z</laststatusat>
 <submittedat>2012-01-01T12:00:02.000Z</submittedat>
 <receivedat>2012-01-01T12:00:01.05Z</receivedat>
 <type>TYPE</type>
 <to>
   <phonenumber>4538224364236</phonenumber>
 </to>
 <from>
  <phonenumber>428377843</phonenumber>
 </from>
 <summary>SUM</summary>
 <body uri="http://rrehekr"/>
 <direction>OUT</direction>
 <readat>2013-01-01T12:00:01.05Z</readat>
 <sentat>2013-02-01T12:00:01.05Z</sentat>
 <deliveredat>2013-02-02T12:00:01.05Z</deliveredat>
 <readby>john.doe@example.com</readby>
 <parts>1</parts>
 <username>user</username>
</messageheader>"""

MESSAGE_BODY = f"""<?xml version="1.0" encoding="utf-8"?>
<messagebody {NS}>
    <bodytext>Hey there</bodytext>
    <characterset>GSM</characterset>
</messagebody>"""

BATCH_FIELDS = """
  <createdat>2012-01-01T12:00:00Z</createdat>
  <batchsize>1</batchsize>
  <persistedbatchsize>1</persistedbatchsize>
  <status>
   <acknowledged>0</acknowledged>
   <authorisationfailed>0</authorisationfailed>
   <connecting>0</connecting>
   <delivered>0</delivered>
   <failed>0</failed>
   <partiallydelivered>0</partiallydelivered>
   <rejected>0</rejected>
   <scheduled>0</scheduled>
   <sent>0</sent>
   <submitted>1</submitted>
   <validityperiodexpired>0</validityperiodexpired>
   <cancelled>0</cancelled>
  </status>
  <accountreference>EXHEYEYE</accountreference>
  <createdby>efiwewe@example.com</createdby>
  <name>my cool batch</name>"""

BATCHES = f"""<?xml version="1.0" encoding="utf-8"?>
<messagebatches startindex="0" count="15" totalcount="15" {NS}>
 <messagebatch id="messagebatchid" uri="messagebatchuri">{BATCH_FIELDS}
 </messagebatch>
</messagebatches>"""

BATCH = f"""<?xml version="1.0" encoding="utf-8"?>
<messagebatch id="messagebatchid" uri="messagebatchuri" {NS}>{BATCH_FIELDS}
</messagebatch>"""

DISPATCH = f"""<?xml version="1.0" encoding="utf-8"?>
<messageheaders batchid="batchID" {NS}>
  <messageheader uri="messageURI" id="messageID" />
</messageheaders>"""
